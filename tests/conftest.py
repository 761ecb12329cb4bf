import pytest

from relnorm import RelationSchema, config
from relnorm.parser.fd_parser import parse_attributes, parse_dependencies


@pytest.fixture(autouse=True)
def reset_config():
    config.reset()
    yield
    config.reset()


@pytest.fixture
def abc_schema():
    # AB -> C, C -> B: 3NF but not BCNF
    return RelationSchema.from_strings("A, B, C", "A, B --> C; C --> B")


@pytest.fixture
def course_fds():
    return parse_dependencies("C-->T; H,R-->C; H,T-->R; C,S-->G; H,S-->R")


@pytest.fixture
def course_schema(course_fds):
    return RelationSchema(parse_attributes("C, T, H, R, S, G"), course_fds)


@pytest.fixture
def app_schema():
    return RelationSchema.from_strings(
        "name, location, favAppl, application, provider",
        "name-->location; name-->favAppl; application-->provider",
    )

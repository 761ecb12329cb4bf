from setuptools import setup, find_packages

setup(
    name='relnorm',
    version='0.0.1',
    author='Marc Hadfield',
    author_email='marc@vital.ai',
    description='Functional dependency analysis and relational schema normalization',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=["tests", "tests.*"]),
    license='Apache License 2.0',
    install_requires=[

        'lark>=1.2.2',
        'PyYAML',
        'pandas',

    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.10',
)

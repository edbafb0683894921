import setuptools

import genprompt.version

with open("README.md", "r") as readme:
    long_description = readme.read()

setuptools.setup(
    name='genprompt',
    version=genprompt.version.VERSION,
    author='John van Zantvoort',
    author_email='john@vanzantvoort.org',
    description='Generate a bash PS1 definition for the current host',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages('.'),
    scripts=['bin/genprompt'],
    install_requires=[
        'Jinja2',
        'PyYAML',
    ],
    extras_require={
        'test': ['pytest', 'dill'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: POSIX :: Linux',
        'Operating System :: MacOS',
    ],
    python_requires='>=3.7'
)

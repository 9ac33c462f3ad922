import sys
from setuptools import setup, find_packages

# collect version
sys.path.insert(0, "reverser")
from version import __version__ as reverser_version

reverser_packages = find_packages(include=["reverser", "reverser.*"])
reverser_package_dirs = {'reverser': 'reverser'}

# Classifiers
classifiers = """
Development Status :: 3 - Alpha
Intended Audience :: Developers
License :: OSI Approved
Programming Language :: Python
Programming Language :: Python :: 3
Topic :: Software Development
Topic :: Text Processing
Operating System :: POSIX
Operating System :: Unix
Operating System :: MacOS
"""

setup(
    # package information
    name='cgat-reverser',
    version=reverser_version,
    description='reverser : string reversal tools',
    author='Andreas Heger',
    author_email='andreas.heger@gmail.com',
    license="MIT",
    platforms=["any"],
    keywords="string reversal",
    long_description='reverser : reverse alphabets and strings',
    classifiers=[_f for _f in classifiers.split("\n") if _f],
    url="http://www.cgat.org/cgat/Tools/",
    packages=reverser_packages,
    package_dir=reverser_package_dirs,
    include_package_data=True,
    python_requires=">=3.7",
    install_requires=[
        "cgatcore",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': ['reverser = reverser.tools.cli:main'],
    },
    zip_safe=False,
    test_suite="tests",
)

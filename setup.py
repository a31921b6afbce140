from setuptools import setup, find_packages
import re

# Read version from reviewflags/__init__.py
with open('reviewflags/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='review-flags',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'requests',
        'python-dotenv',
        'click>=8.0',
        'PyYAML',
        'mcp>=1.0.0,<2',
    ],
    extras_require={
        'mcp': ['mcp>=1.0.0,<2'],
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'reviewflags=reviewflags.cli.__main__:main',
            'reviewflags-mcp=reviewflags.mcp.server:run_server',
        ],
    },
    author='CLI Developer',
    description='Review status labels for GitHub pull requests, driven by chat commands.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)

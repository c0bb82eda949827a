import os
import re
import subprocess
from setuptools import setup, find_packages, Command

from vimopts.app_version import version

root_dir = os.path.abspath(os.path.dirname(__file__))


class Coverage(Command):
    description = 'run tests with code coverage'
    user_options = [
        ('pattern=', 'p',
         "test files to run (e.g. 'test_options.py')"),
    ]

    def initialize_options(self):
        self.pattern = None

    def finalize_options(self):
        pass

    def run(self):
        env = dict(os.environ)
        env.update({
            'COVERAGE_FILE': os.path.join(root_dir, '.coverage'),
        })

        subprocess.run(['coverage', 'erase'], check=True)
        subprocess.run(
            ['coverage', 'run', '--source=vimopts', '-m', 'unittest',
             'discover', '-t', root_dir, '-s', 'test'] +
            (['-q'] if self.verbose == 0 else []) +
            (['-p', self.pattern] if self.pattern else []),
            env=env, check=True
        )


custom_cmds = {
    'coverage': Coverage,
}

with open(os.path.join(root_dir, 'README.md'), 'r') as f:
    # Read from the file and strip out the badges.
    long_desc = re.sub(r'(^# vimopts.*)\n\n(.+\n)*', r'\1', f.read())

setup(
    name='vimopts',
    version=version,

    description='A typed, scoped option registry for editor emulation',
    long_description=long_desc,
    long_description_content_type='text/markdown',
    keywords='vim options settings registry',

    license='BSD-3-Clause',

    classifiers=[
        'Development Status :: 3 - Alpha',

        'Intended Audience :: Developers',

        'Topic :: Text Editors',
        'License :: OSI Approved :: BSD License',

        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],

    packages=find_packages(exclude=['test', 'test.*']),

    python_requires='>=3.8',
    install_requires=['colorama', 'pyyaml'],
    extras_require={
        'dev': ['coverage', 'flake8 >= 3.7', 'flake8-quotes'],
        'test': ['coverage', 'flake8 >= 3.7', 'flake8-quotes'],
    },

    entry_points={
        'console_scripts': [
            'vimopts=vimopts.driver:main',
        ],
    },

    cmdclass=custom_cmds,
)

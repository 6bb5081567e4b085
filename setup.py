from setuptools import find_packages, setup

setup(
  name = 'stylescan',
  packages = find_packages('src'),
  package_dir = {'': 'src'},
  version = '1.0.0',
  description = 'command line tool that surveys a Java service repository and drafts a code style report',
  python_requires = '>=3.10',
  keywords = ['java', 'code style', 'static analysis', 'report'],
  install_requires=[
"typer>=0.9",
"rich>=13.0",
"pydantic>=2.0",
"pydantic-settings>=2.0",
"PyYAML>=6.0",
"tomli>=2.0; python_version < '3.11'",
      ],
  extras_require={
    'test': [
"pytest>=7.0",
    ],
  },
  entry_points={
    'console_scripts': [
      'stylescan=stylescan.cli.main:app',
    ],
  },
  classifiers=[
    'Development Status :: 4 - Beta',
    'Intended Audience :: Developers',
    'Topic :: Software Development :: Quality Assurance',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3.10',
    'Programming Language :: Python :: 3.11',
    'Programming Language :: Python :: 3.12',
  ],
)

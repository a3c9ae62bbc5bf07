# standard imports
from setuptools import setup


requirements = []
with open('requirements.txt', 'r') as requirements_file:
   for requirement in requirements_file:
       requirements.append(requirement.rstrip())


test_requirements = []
with open('test_requirements.txt', 'r') as requirements_file:
   for requirement in requirements_file:
       test_requirements.append(requirement.rstrip())


setup(
    install_requires=requirements,
    extras_require = {
        'test': test_requirements,
        }
)

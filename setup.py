import os
from setuptools import setup, find_packages
import arkclient


def read_pip_requirements():
    reqs = []
    with open(os.path.join(os.path.dirname(__file__), "requirements.txt"), 'r') as f:
        lines = f.readlines()
    for line in lines:
        line = line.strip()
        if line and '://' not in line:
            reqs.append(line)
    return reqs


def read_file(name):
    with open(os.path.join(os.path.dirname(__file__), name), 'r', encoding='utf-8') as f:
        file = f.read()
    return file


setup(
    name='arkclient',
    version=arkclient.__version__,
    license='MIT',
    python_requires='>=3.11',
    description='Asynchronous client for the ARK blockchain explorer API',
    long_description=read_file('README.rst'),
    install_requires=read_pip_requirements(),
    extras_require={
        'test': ['pytest']
    },
    packages=find_packages(exclude=['htmlcov', 'test', 'test.*']),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Framework :: AsyncIO',
    ],
    include_package_data=True
)

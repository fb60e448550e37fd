from setuptools import setup


setup(
    name='pingwarden',
    version='0.1',
    packages=[
        'pingwarden',
    ],

    description='Pingback receiver for Django sites that verifies source pages and suppresses spam',
    python_requires='>=3.8',
    install_requires = [
        'html5lib',
        'django',
    ],
    extras_require = {
        'test': ['pytest'],
    },
)

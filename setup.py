from setuptools import setup, find_packages

setup(
    name='orientation',
    version='1.0.0',
    description='Euler angle, quaternion, and rotation matrix orientations with exact conversions and interpolation',
    packages=find_packages(include=['orientation', 'orientation.*']),
    python_requires='>=3.11',
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
)

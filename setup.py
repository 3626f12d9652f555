from setuptools import setup, find_packages
import os
from glob import glob

package_name = 'ppm_codec'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    data_files=[
        (os.path.join('share', package_name, 'examples'), glob('examples/*')),
    ],
    install_requires=['setuptools', 'numpy', 'PyYAML'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    description='Codec for binary PPM (P6) raster images',
    license='MIT',
    entry_points={
        'console_scripts': [
            'ppm_tool = ppm_codec.ppm_tool:main',
        ],
    },
)

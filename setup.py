from setuptools import find_packages, setup

package_name = 'qt_thumbstick'

setup(
    name=package_name,
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.8',
    install_requires=['setuptools', 'PyQt5'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    keywords=['joystick', 'thumbstick', 'qt', 'widget', 'touch'],
    description='On-screen virtual joystick with dead zone, Y inversion and a PyQt5 widget.',
    license='BSD',
    entry_points={
        'console_scripts': [
            'qt_thumbstick = ' + package_name + '.main:main',
        ],
    },
)

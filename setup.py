import setuptools

with open('README.md', 'r') as file:
    long_description = file.read()

setuptools.setup(
    name='gvgsvg',
    version='0.1.0b1',
    description='Convert vector graphics drawing commands to and from SVG',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='BSD-2-Clause',
    keywords='svg vector graphics conversion',
    packages=[
        'gvgsvg'
    ],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        'Topic :: Multimedia :: Graphics :: Graphics Conversion'
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy >= 1.14',
        'typing_extensions >= 3.7'
    ],
    extras_require = {
        'dev': [
            'black',
            'flake8',
            'nox',
            'pytest'
        ]
    }
)

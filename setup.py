from setuptools import setup, find_packages

setup(
    name='shadergraph',
    version='0.1.0',
    author='shadergraph contributors',
    description='Node graphs of shape functions compiled to WGSL shader code.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(include=['shadergraph', 'shadergraph.*']),
    include_package_data=True,
    install_requires=[
        'numpy',
        'watchdog',
    ],
    extras_require={
        'test': [
            'pytest>=7',
        ]
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Graphics',
        'Topic :: Software Development :: Code Generators',
    ],
    python_requires='>=3.7',
)

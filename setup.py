#!/usr/bin/env python

import setuptools


setuptools.setup(
        name='mindjuice',
        version='0.1',
        license='MIT',
        description='A two stage brainfuck compiler and interpreter',
        packages=['mindjuice'],
        data_files=[
          ('share/mindjuice/', [
              'README.md',
              ]),
        ],
        scripts=['bin/mindjuice'],
        extras_require={
          'test': ['pytest'],
        },
        platforms=['Unix'],
        classifiers=[
            'Development Status :: 4 - Beta',
            'Environment :: Console',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: MIT License',
            'Operating System :: Unix',
            'Programming Language :: Python',
            'Programming Language :: Python :: 3',
            'Topic :: Software Development :: Interpreters',
            ]
        )

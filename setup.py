"""ffarith setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import ffarith

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='ffarith',
    version=ffarith.__version__,
    description='ffarith -- Finite field and modular arithmetic in Python',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['finite fields', 'GF(2)', 'binary polynomials', 'modular arithmetic',
              'Berlekamp factorization', 'primitive polynomials', 'number theory'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=ffarith.__license__,
    packages=['ffarith'],
    platforms=['any'],
    python_requires='>=3.8',
    install_requires=['gmpy2'],
    extras_require={'test': ['numpy', 'pytest']}
)

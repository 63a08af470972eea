from setuptools import setup


setup(name='payuri',
      version='0.1.0',
      description='Decode and encode BIP21-style payment URIs',
      author='',
      author_email='',
      license='GPL',
      package_dir={'': 'src'},
      packages=['pubase', 'pubitcoin', 'puclient'],
      scripts=['scripts/payment-uri.py'],
      install_requires=['chromalog>=1.0.5', 'colorama',
                        'python-bitcointx>=1.1.3', 'coincurve>=18.0.0',
                        'mnemonic>=0.20'],
      extras_require={'test': ['pytest>=7.0']},
      python_requires='>=3.7',
      zip_safe=False)

from pathlib import Path
from typing import Any, Dict

from setuptools import setup

meta: Dict[str, Any] = {}

exec(Path('colourconv/_metadata.py').read_text(), meta)

with open('requirements.txt', encoding='utf-8') as fh:
    reqs = fh.readlines()

with open('requirements-dev.txt', encoding='utf-8') as fh:
    reqs_dev = fh.readlines()

with open('README.md', encoding='utf-8') as fh:
    long_description = fh.read()

setup(
    name='colourconv',
    description='Conversions between the RGB, Hex, CMYK, HSL and HSV colour models with validated components.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    version=meta['__version__'],
    packages=['colourconv'],
    package_data={
        'colourconv': ['py.typed'],
    },
    python_requires='>=3.8',
    install_requires=reqs,
    extras_require={'dev': reqs_dev},
    keywords='colour color rgb hex cmyk hsl hsv conversion',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)',
    ],
    license='GNU LGPL 3.0 or later',
)

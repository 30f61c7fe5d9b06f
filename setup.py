import os
import re

from setuptools import setup


def get_version():
    module_init = 'razertray/version.py'

    if not os.path.isfile(module_init):
        module_init = '../' + module_init
        if not os.path.isfile(module_init):
            raise ValueError('Unable to determine version!')

    with open(module_init) as version_file:
        return re.search(r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
                         version_file.read()).group(1)


setup(name='razertray',
      version=get_version(),
      description='Capability-aware asyncio client for the OpenRazer daemon',
      license='LGPL',
      platforms='Linux',
      packages=['razertray', 'razertray.openrazer', 'razertray.cli', 'razertray.cli.commands'],
      entry_points={
          'console_scripts': [
              'razertray = razertray.cli.main:cli_entry',
          ]
      },
      python_requires='>=3.10',
      install_requires=['argcomplete', 'colorlog', 'dbus-fast', 'frozendict',
                        'ruamel.yaml>=0.17', 'wrapt'],
      extras_require={'test': ['pytest']},
      keywords='razer openrazer dbus battery dpi',
      include_package_data=True,
      zip_safe=False,
      classifiers=[
          'Development Status :: 3 - Alpha',
          'Environment :: Console',
          'Intended Audience :: Developers',
          'Intended Audience :: End Users/Desktop',
          'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
          'Operating System :: POSIX :: Linux',
          'Programming Language :: Python :: 3 :: Only',
          'Topic :: System :: Hardware :: Hardware Drivers'
      ])

import os
import re

from pydoc import locate

from setuptools import setup
from setuptools.command.install import install


def get_version():
    module_init = 'rgbsync/version.py'

    if not os.path.isfile(module_init):
        module_init = '../' + module_init
        if not os.path.isfile(module_init):
            raise ValueError('Unable to determine version!')

    return re.search(r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
                     open(module_init).read()).group(1)



class UdevRulesGenerator(install):

    @staticmethod
    def generate():
        hw = locate('rgbsync.hardware.Hardware')
        assert hw is not None

        rules = {}
        for model in hw.all_devices():
            rule = rules.setdefault(model.rules_file, '')
            for product_id in model.product_ids:
                if model.uses_hidraw:
                    rule += ('KERNEL=="hidraw*", ATTRS{idVendor}=="%s", '
                             'ATTRS{idProduct}=="%s", MODE="0666"\n'
                             % (model.vendor_id, product_id))
                    continue

                for driver in model.drivers:
                    rule += ('ACTION=="add", SUBSYSTEM=="hid", DRIVER=="%s", '
                             'ENV{HID_ID}=="*:0000%s:0000%s", '
                             'RUN+="/bin/sh -c \'cd /sys%%p && chmod 0666 %s || true\'"\n'
                             % (driver, str(model.vendor_id).upper(),
                                str(product_id).upper(), ' '.join(model.controls)))
            rules[model.rules_file] = rule

        return rules


    def run(self):
        for filename, rule in UdevRulesGenerator.generate().items():
            print('# %s\n%s' % (filename, rule))


setup(name='rgbsync',
      version=get_version(),
      description='Keyboard and mouse lighting in sync with Omarchy themes',
      url='https://github.com/rgbsync/rgbsync',
      author='rgbsync developers',
      license='LGPL',
      platforms='Linux',
      packages=['rgbsync', 'rgbsync.client', 'rgbsync.client.commands'],
      package_data={'rgbsync': ['data/*.yaml']},
      entry_points={
          'console_scripts': [
              'rgbsync = rgbsync.client.main:cli_entry'
          ]
      },
      install_requires=['argcomplete', 'coloraide', 'colorlog', 'frozendict',
                        'numpy', 'pyudev', 'ruamel.yaml', 'wrapt'],
      extras_require={'test': ['pytest']},
      cmdclass={'udev_rules': UdevRulesGenerator},
      keywords='rgb legion razer openrazer omarchy keyboard mouse',
      include_package_data=True,
      python_requires='>=3.10',
      zip_safe=False,
      classifiers=[
          'Development Status :: 4 - Beta',
          'Environment :: Console',
          'Intended Audience :: End Users/Desktop',
          'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
          'Operating System :: POSIX :: Linux',
          'Programming Language :: Python :: 3 :: Only',
          'Topic :: System :: Hardware :: Hardware Drivers'
      ])

# Copyright 2017 VMware, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or
# implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os

import setuptools


def parse_requirements(requirements_file):
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                        requirements_file)
    requirements = []
    with open(path) as f:
        for line in f:
            line = line.split('#', 1)[0].strip()
            if line:
                requirements.append(line)
    return requirements


Name = 'nsxt-provider'
Url = "https://github.com/vmware/terraform-provider-nsxt"
Version = '0.1.0'
License = 'Apache License 2.0'
Author = 'VMware'
Summary = 'NSX-T resource plugin (logical router link port on tier-1)'

ConsoleScripts = [
    'nsxt-check-config = nsxt_provider.cmd.check_config:main',
]


setuptools.setup(
    name=Name,
    version=Version,
    url=Url,
    author=Author,
    description=Summary,
    long_description=Summary,
    license=License,
    classifiers=[
        'Intended Audience :: System Administrators',
        'Intended Audience :: Information Technology',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.8',
    install_requires=parse_requirements('requirements.txt'),
    extras_require={'test': parse_requirements('test-requirements.txt')},
    include_package_data=True,
    packages=setuptools.find_packages(include=['nsxt_provider',
                                               'nsxt_provider.*']),
    entry_points={
        'console_scripts': ConsoleScripts,
        'oslo.config.opts': ['nsxt_provider = nsxt_provider.opts:list_opts'],
    },
)

#!/usr/bin/env python3

import os
import sys
basedir = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, basedir)

from libcrc32 import VERSION_STRING
from setuptools import setup

with open(os.path.join(basedir, "README.rst"), "rb") as fd:
	readmeText = fd.read().decode("UTF-8")

setup(
	name		= "crc32",
	version		= VERSION_STRING,
	description	= "Parametrized CRC-32 checksum calculator",
	license		= "GNU General Public License v2 or later",
	author		= "Michael Büsch",
	author_email	= "m@bues.ch",
	python_requires = ">=3.7",
	scripts		= [
		"crc32",
	],
	packages	= [
		"libcrc32",
	],
	extras_require	= {
		"test" : [
			"pytest",
			"cffi",
			"setuptools",
		],
	},
	keywords	= "CRC CRC32 CRC-32C checksum",
	classifiers	= [
		"Development Status :: 5 - Production/Stable",
		"Environment :: Console",
		"Intended Audience :: Developers",
		"Intended Audience :: Information Technology",
		"Intended Audience :: Telecommunications Industry",
		"License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)",
		"Operating System :: OS Independent",
		"Programming Language :: Python",
		"Programming Language :: Python :: 3",
		"Topic :: Software Development :: Libraries",
		"Topic :: System :: Archiving",
		"Topic :: Utilities",
	],
	long_description=readmeText,
	long_description_content_type="text/x-rst",
)

# vim: ts=8 sw=8 noexpandtab

# vim: ts=8 sw=8 noexpandtab
#
#   Parametrized CRC-32 calculator
#
#   Copyright (c) 2023-2024 Michael Buesch <m@bues.ch>
#
#   This program is free software; you can redistribute it and/or modify
#   it under the terms of the GNU General Public License as published by
#   the Free Software Foundation; either version 2 of the License, or
#   (at your option) any later version.
#
#   This program is distributed in the hope that it will be useful,
#   but WITHOUT ANY WARRANTY; without even the implied warranty of
#   MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#   GNU General Public License for more details.
#
#   You should have received a copy of the GNU General Public License along
#   with this program; if not, write to the Free Software Foundation, Inc.,
#   51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.
#

VERSION_MAJOR = 1
VERSION_MINOR = 0
VERSION_EXTRA = ""
VERSION_STRING = "%d.%d%s" % (VERSION_MAJOR, VERSION_MINOR, VERSION_EXTRA)

from libcrc32.util import *
from libcrc32.parameters import *
from libcrc32.table import *
from libcrc32.reference import *
from libcrc32.engine import *
from libcrc32.selftest import *

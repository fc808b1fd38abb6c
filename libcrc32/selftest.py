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

from libcrc32.engine import *
from libcrc32.parameters import *
from libcrc32.reference import *
from libcrc32.table import *

import sys

__all__ = [
	"runSelfTest",
	"compileTable",
]

def compileTable(table):
	"""Compile the generated C source of the table with cffi
	and return the table read back from the compiled module.
	"""
	tmpdir = None
	try:
		import importlib.util, shutil, tempfile
		from cffi import FFI
		ffibuilder = FFI()
		ffibuilder.set_source("testmod_crc32",
				      "#include <stdint.h>\n"
				      "typedef uint32_t crc32_t;\n" +
				      genCTable(table, name="crc32_table"))
		ffibuilder.cdef("typedef uint32_t crc32_t;\n" +
				genCTable(table, name="crc32_table", declOnly=True))
		tmpdir = tempfile.mkdtemp(prefix="crc32_")
		libPath = ffibuilder.compile(tmpdir=tmpdir, verbose=False)
		spec = importlib.util.spec_from_file_location("testmod_crc32", libPath)
		testmod_crc32 = importlib.util.module_from_spec(spec)
		spec.loader.exec_module(testmod_crc32)
		return tuple(testmod_crc32.lib.crc32_table)
	finally:
		if tmpdir:
			shutil.rmtree(tmpdir, ignore_errors=True)

def runSelfTest(ctx=None,
		dumpParams=False,
		dumpTable=False,
		compileTables=False,
		out=None):
	"""Check all presets against their check values
	and against the bitwise reference implementation.
	Returns the number of failures.
	The context is left with the last tested preset selected.
	"""
	if ctx is None:
		ctx = Crc32()
	failures = 0
	for preset in PRESETS:
		ctx.selectAlgorithm(preset.name)
		if dumpParams:
			print(ctx.dumpParameters(), file=out)
		if dumpTable:
			print(ctx.dumpTable(), file=out)
		crc = ctx.calc(CHECK_DATA)
		ref = Crc32Reference.crcParams(CHECK_DATA, preset)
		errors = []
		if crc != preset.checkValue:
			errors.append(f"expected 0x{preset.checkValue:08X}")
		if crc != ref:
			errors.append(f"reference 0x{ref:08X}")
		if compileTables and compileTable(ctx.table) != ctx.table:
			errors.append("compiled C table mismatch")
		if errors:
			failures += 1
			print(f"FAIL {preset.name}: 0x{crc:08X} ({', '.join(errors)})",
			      file=out)
		else:
			print(f"PASS {preset.name}: 0x{crc:08X}", file=out)
	return failures

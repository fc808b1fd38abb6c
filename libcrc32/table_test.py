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

from libcrc32 import *

import importlib.util
import shutil
import unittest

def haveCompiler():
	return (importlib.util.find_spec("cffi") is not None and
		any(shutil.which(cc) for cc in ("cc", "gcc", "clang")))

class TableTest(unittest.TestCase):
	def test_reflected(self):
		table = buildTable(0x04C11DB7, True)
		self.assertEqual(len(table), 256)
		self.assertEqual(table[0], 0x00000000)
		self.assertEqual(table[1], 0x77073096)
		self.assertEqual(table[128], 0xEDB88320)
		self.assertEqual(table[255], 0x2D02EF8D)

	def test_normal(self):
		table = buildTable(0x04C11DB7, False)
		self.assertEqual(len(table), 256)
		self.assertEqual(table[0], 0x00000000)
		self.assertEqual(table[1], 0x04C11DB7)
		self.assertEqual(table[2], 0x09823B6E)
		self.assertEqual(table[255], 0xB1F740B4)

	def test_range(self):
		for preset in PRESETS:
			for reflect in (False, True):
				table = buildTable(preset.polynomial, reflect)
				self.assertTrue(all(0 <= v <= 0xFFFFFFFF for v in table))
				self.assertEqual(len(set(table)), 256)

	def test_reference(self):
		for preset in PRESETS:
			for reflect in (False, True):
				with self.subTest(preset=preset.name, reflect=reflect):
					table = buildTable(preset.polynomial, reflect)
					ref = tuple(Crc32Reference.crc(crc=0,
								       data=i,
								       polynomial=preset.polynomial,
								       shiftRight=reflect)
						    for i in range(256))
					self.assertEqual(table, ref)

	def test_invalidPolynomial(self):
		with self.assertRaises(ValueError):
			buildTable(0x100000000, True)
		with self.assertRaises(ValueError):
			buildTable(-1, False)

	def test_genCTable(self):
		table = buildTable(0x04C11DB7, True)
		lines = genCTable(table).splitlines()
		self.assertEqual(len(lines), 1 + 32 + 1)
		self.assertEqual(lines[0], "crc32_t table[] = {")
		self.assertEqual(lines[1], "\t0x00000000, 0x77073096, 0xEE0E612C, 0x990951BA, "
					   "0x076DC419, 0x706AF48F, 0xE963A535, 0x9E6495A3, ")
		self.assertEqual(lines[-1], "};")
		self.assertEqual(genCTable(table, name="t", crcType="uint32_t", declOnly=True),
				 "extern uint32_t t[256];")

	def test_contextTable(self):
		ctx = Crc32("MPEG-2")
		self.assertEqual(ctx.table, buildTable(0x04C11DB7, False))
		self.assertTrue(ctx.dumpTable().startswith("crc32_t table[] = {\n\t0x00000000, 0x04C11DB7, "))

	@unittest.skipUnless(haveCompiler(), "cffi or C compiler not available")
	def test_compiledTable(self):
		for name in ("CRC-32", "MPEG-2"):
			with self.subTest(name=name):
				table = Crc32(name).table
				self.assertEqual(compileTable(table), table)

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
from libcrc32.main import main, computeCRC32, FileChangedError

import contextlib
import io
import os
import tempfile
import unittest
from unittest import mock

class MainTest(unittest.TestCase):
	def setUp(self):
		self.tmpdir = tempfile.TemporaryDirectory()
		self.checkFile = os.path.join(self.tmpdir.name, "check.txt")
		with open(self.checkFile, "wb") as fd:
			fd.write(b"123456789")
		self.bigFile = os.path.join(self.tmpdir.name, "big.bin")
		with open(self.bigFile, "wb") as fd:
			fd.write(bytes(range(256)) * 20)

	def tearDown(self):
		self.tmpdir.cleanup()

	def run_main(self, *argv, stdin=b""):
		out = io.StringIO()
		err = io.StringIO()
		fakeStdin = mock.Mock()
		fakeStdin.buffer = io.BytesIO(stdin) if isinstance(stdin, bytes) else stdin
		with contextlib.redirect_stdout(out), \
		     contextlib.redirect_stderr(err), \
		     mock.patch("sys.stdin", fakeStdin):
			ret = main(list(argv))
		return ret, out.getvalue(), err.getvalue()

	def test_defaultFile(self):
		ret, out, err = self.run_main(self.checkFile)
		self.assertEqual(ret, 0)
		self.assertEqual(out, f"CBF43926 {self.checkFile}\n")
		self.assertEqual(err, "")

	def test_stdin(self):
		ret, out, err = self.run_main(stdin=b"123456789")
		self.assertEqual(ret, 0)
		self.assertEqual(out, "CBF43926 \n")
		ret, out, err = self.run_main("-", stdin=b"123456789")
		self.assertEqual(out, "CBF43926 \n")

	def test_algorithms(self):
		for name, expected in (("crc-32c", "E3069283"),
				       ("CRC-32/BZIP2", "FC891918"),
				       ("posix", "765E7680"),
				       ("XFER", "BD0BE338")):
			with self.subTest(name=name):
				ret, out, err = self.run_main("-a", name, self.checkFile)
				self.assertEqual(ret, 0)
				self.assertEqual(out, f"{expected} {self.checkFile}\n")

	def test_unknownAlgorithm(self):
		ret, out, err = self.run_main("-a", "not-a-real-algo", self.checkFile)
		self.assertEqual(ret, 1)
		self.assertEqual(out, "")
		self.assertIn("ERROR: Unrecognized algorithm 'not-a-real-algo'", err)

	def test_listAlgorithms(self):
		ret, out, err = self.run_main("-a", "help")
		self.assertEqual(ret, 1)
		self.assertTrue(out.startswith("usage: "))
		self.assertIn("Preset algorithms:", out)
		self.assertIn('name="CRC-32K" poly=0x741B8CD7', out)
		self.assertIn('name="user"', out)

	def test_customParameters(self):
		ret, out, err = self.run_main("-f", "0", self.checkFile)
		self.assertEqual(ret, 0)
		self.assertEqual(out, f"FC891918 {self.checkFile}\n")
		ret, out, err = self.run_main("-p", "0x1EDC6F41", self.checkFile)
		self.assertEqual(out, f"E3069283 {self.checkFile}\n")
		ret, out, err = self.run_main("-i", "0", "-x", "FFFFFFFF", "-p", "04c11db7",
					      "-f", "0", "-a", "CRC-32C", self.checkFile)
		self.assertEqual(out, f"765E7680 {self.checkFile}\n")
		ret, out, err = self.run_main("-a", "crc-32", "-f", "7", self.checkFile)
		self.assertEqual(out, f"2639F4CB {self.checkFile}\n")

	def test_invalidHex(self):
		with self.assertRaises(SystemExit):
			self.run_main("-p", "xyz", self.checkFile)

	def test_sizes(self):
		ret, out, err = self.run_main("-s", self.checkFile)
		self.assertEqual(out, f"CBF43926   9  {self.checkFile}\n")
		ret, out, err = self.run_main("-s", self.bigFile)
		crc = Crc32().calc(bytes(range(256)) * 20)
		self.assertEqual(out, f"{crc:08X} 5120  {self.bigFile}\n")
		ret, out, err = self.run_main("-S", self.bigFile)
		self.assertEqual(out, f"{crc:08X}   5K {self.bigFile}\n")

	def test_missingFile(self):
		missing = os.path.join(self.tmpdir.name, "missing")
		ret, out, err = self.run_main(missing, self.checkFile)
		self.assertEqual(ret, 1)
		self.assertEqual(out, f"CBF43926 {self.checkFile}\n")
		self.assertTrue(err.startswith(f"{missing}: "))

	def test_dumps(self):
		ret, out, err = self.run_main("-d", "-D", "-a", "jamcrc", self.checkFile)
		self.assertEqual(ret, 0)
		lines = out.splitlines()
		self.assertEqual(lines[0], 'name="JAMCRC" poly=0x04C11DB7 '
					   'init=0xFFFFFFFF final=0x00000000 flags=3')
		self.assertEqual(lines[1], "crc32_t table[] = {")
		self.assertEqual(lines[-1], f"340BC6D9 {self.checkFile}")

	def test_selfTest(self):
		ret, out, err = self.run_main("-T")
		self.assertEqual(ret, 0)
		self.assertTrue(out.startswith("Executing selftest...\n"))
		self.assertTrue(out.endswith("Unexpected failures: 0\n"))

	def test_computeCRC32(self):
		ctx = Crc32("CRC-32Q")
		crc, nrBytes = computeCRC32(ctx, io.BytesIO(b"123456789"))
		self.assertEqual((crc, nrBytes), (0x3010BF7F, 9))
		with open(self.bigFile, "rb") as fd:
			crc, nrBytes = computeCRC32(ctx, fd)
		self.assertEqual(nrBytes, 5120)
		self.assertEqual(crc, ctx.calc(bytes(range(256)) * 20))

	def test_stdinFileOffset(self):
		offsetFile = os.path.join(self.tmpdir.name, "offset.bin")
		with open(offsetFile, "wb") as fd:
			fd.write(b"skip\n123456789")
		with open(offsetFile, "rb") as fd:
			fd.read(5)
			ret, out, err = self.run_main(stdin=fd)
		self.assertEqual(ret, 0)
		self.assertEqual(out, "CBF43926 \n")
		self.assertEqual(err, "")

	def test_computeCRC32SizeCheck(self):
		ctx = Crc32()
		with open(self.bigFile, "rb") as fd:
			fd.seek(1024)
			with self.assertRaises(FileChangedError) as cm:
				computeCRC32(ctx, fd)
			self.assertIn("File size changed", str(cm.exception))
		with open(self.bigFile, "rb") as fd:
			fd.seek(1024)
			crc, nrBytes = computeCRC32(ctx, fd, checkSize=False)
		self.assertEqual(nrBytes, 4096)
		self.assertEqual(crc, ctx.calc((bytes(range(256)) * 20)[1024:]))

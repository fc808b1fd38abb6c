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

import os
import stat
import sys
import argparse

__all__ = [
	"main",
	"computeCRC32",
]

CHUNK_SIZE = 4 * 1024

class FileChangedError(Exception):
	pass

def computeCRC32(ctx, fd, checkSize=True):
	"""Calculate the CRC of a binary file object.
	Returns a tuple (crc, nrBytes).
	If checkSize is True, a regular file must not change its size while reading.
	"""
	size = None
	if checkSize:
		try:
			st = os.fstat(fd.fileno())
			if stat.S_ISREG(st.st_mode):
				size = st.st_size
		except (AttributeError, OSError, ValueError):
			# Not a real file. The size cannot be checked.
			pass
	nrBytes = 0
	crc = ctx.init()
	while True:
		buf = fd.read(CHUNK_SIZE)
		if not buf:
			break
		nrBytes += len(buf)
		crc = ctx.update(crc, buf)
	crc = ctx.final(crc)
	if size is not None and size != nrBytes:
		raise FileChangedError("File size changed during operation")
	return crc, nrBytes

def formatResult(crc, name, nrBytes=None, humanReadable=False):
	if nrBytes is None:
		return f"{crc:08X} {name}"
	if humanReadable:
		size, pfx = humanSize(nrBytes)
	else:
		size, pfx = nrBytes, " "
	return f"{crc:08X} {size:3d}{pfx} {name}"

def main(argv=None):
	try:
		def argHex(string):
			try:
				return hexInt(string)
			except ValueError as e:
				raise argparse.ArgumentTypeError(str(e))
		p = argparse.ArgumentParser(
			description="Compute and print CRC-32 checksums for files. "
				    "With no FILE, or when FILE is -, read standard input.",
			epilog="Use '-a help' to print a list of the preset algorithms.")
		g = p.add_mutually_exclusive_group()
		g.add_argument("-s", "--size", action="store_true", help="Print the number of processed bytes")
		g.add_argument("-S", "--human-size", action="store_true", help="Print the number of processed bytes in human readable form")
		p.add_argument("-a", "--algorithm", type=str, default=PRESETS[0].name,
			       help=f"Select the preset CRC algorithm (default: {PRESETS[0].name}). "
				    "Individual algorithm parameters can be overridden with the options below.")
		p.add_argument("-i", "--init", type=argHex, help="Initial CRC value (hex)")
		p.add_argument("-x", "--final-xor", type=argHex, help="Final XOR value (hex)")
		p.add_argument("-p", "--polynomial", type=argHex, help="Generator polynomial (hex)")
		p.add_argument("-f", "--flags", type=argHex,
			       help=f"Bitwise OR of flags (hex): "
				    f"{CRC_RFIN}: reflect input, "
				    f"{CRC_RFOUT}: reflect output, "
				    f"{CRC_ROBYT}: reverse output byte order")
		p.add_argument("-d", "--dump-params", action="store_true", help="Dump the current parameter set")
		p.add_argument("-D", "--dump-table", action="store_true", help="Dump the resulting remainder table as C code")
		p.add_argument("-T", "--test", action="store_true", help="Execute the self test and exit (can be combined with -d and -D)")
		p.add_argument("--test-c", action="store_true", help="Also compile the tables as C code during the self test (requires cffi)")
		p.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION_STRING}")
		p.add_argument("files", metavar="FILE", nargs="*", help="Input files")
		args = p.parse_args(argv)

		ctx = Crc32()
		if args.algorithm.lower() == "help":
			p.print_help()
			print("\nPreset algorithms:")
			print(ctx.dumpAlgorithms())
			return 1
		ctx.selectAlgorithm(args.algorithm)

		overrides = (args.init, args.final_xor, args.polynomial, args.flags)
		if any(o is not None for o in overrides):
			a = ctx.algorithm
			ctx.selectCustom(
				initialValue=a.initialValue if args.init is None else args.init,
				finalXor=a.finalXor if args.final_xor is None else args.final_xor,
				polynomial=a.polynomial if args.polynomial is None else args.polynomial,
				flags=a.flags if args.flags is None else args.flags)

		if args.test or args.test_c:
			print("Executing selftest...")
			failures = runSelfTest(ctx,
					       dumpParams=args.dump_params,
					       dumpTable=args.dump_table,
					       compileTables=args.test_c)
			print(f"Unexpected failures: {failures}")
			return 1 if failures else 0
		if args.dump_params:
			print(ctx.dumpParameters())
		if args.dump_table:
			print(ctx.dumpTable())

		err = 0
		for filename in (args.files or [ "-", ]):
			try:
				if filename == "-":
					# stdin may be positioned anywhere in a file.
					crc, nrBytes = computeCRC32(ctx, sys.stdin.buffer,
								    checkSize=False)
					name = ""
				else:
					with open(filename, "rb") as fd:
						crc, nrBytes = computeCRC32(ctx, fd)
					name = filename
			except (OSError, FileChangedError) as e:
				reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
				print(f"{filename}: {reason}", file=sys.stderr)
				err += 1
				continue
			print(formatResult(crc, name,
					   nrBytes=nrBytes if (args.size or args.human_size) else None,
					   humanReadable=args.human_size))
		return 1 if err else 0
	except CrcError as e:
		print("ERROR: " + str(e), file=sys.stderr)
	return 1

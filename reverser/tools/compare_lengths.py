#!/usr/bin/env python

"""compare-lengths
==================

Compare the length of a string with the length of its reversal::

   reverser compare-lengths input.txt reversed.txt

Both files are read completely and stripped of surrounding
whitespace. The output is a tab-separated table:

.. csv-table::
   :header: "column", "description"

   "key", "always 'length'"
   "input", "length of the input"
   "reversed", "length of the reversed string"
   "status", "'ok' if the lengths agree, 'mismatch' otherwise"

"""

import sys
import cgatcore.experiment as E
import cgatcore.iotools as IOTools

from reverser.toolkit import read_stripped


def main(argv=None):

    parser = E.OptionParser(version="%prog version: $Id$",
                            usage=globals()["__doc__"])

    (options, args) = E.start(parser, argv=argv)

    if len(args) != 2:
        raise ValueError(
            "expected two files (input and reversed), got {}".format(len(args)))

    with IOTools.open_file(args[0]) as inf:
        data = read_stripped(inf)
    with IOTools.open_file(args[1]) as inf:
        reversed_data = read_stripped(inf)

    if len(data) == len(reversed_data):
        status = "ok"
    else:
        status = "mismatch"
        E.warn("length mismatch: {} != {}".format(
            len(data), len(reversed_data)))

    options.stdout.write("key\tinput\treversed\tstatus\n")
    options.stdout.write("length\t{}\t{}\t{}\n".format(
        len(data), len(reversed_data), status))

    E.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))

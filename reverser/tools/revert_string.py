"""revert-string
================

Reverse the contents of one or more files::

   reverser revert-string input.txt

By default the whole file, without trailing line breaks, is reversed
and written as a single line. With ``--per-line`` every line is
reversed separately and the order of lines is kept::

   reverser revert-string --per-line input.txt.gz

Without a filename the tool reads from the standard input.

"""

import sys
import cgatcore.experiment as E
import cgatcore.iotools as IOTools

from reverser.sequence import reverse


def revert_stream(infile, outfile, per_line=False):
    """write reversed content of `infile` to `outfile`.

    Returns the number of lines written.
    """
    if per_line:
        nlines = 0
        for line in infile:
            outfile.write(reverse(line.rstrip("\r\n")) + "\n")
            nlines += 1
        return nlines

    data = "".join(infile.readlines()).rstrip("\r\n")
    outfile.write(reverse(data) + "\n")
    return 1


def main(argv=None):

    parser = E.OptionParser(version="%prog version: $Id$",
                            usage=globals()["__doc__"])

    parser.add_option(
        "--per-line", dest="per_line", action="store_true",
        help="reverse each line separately [%default]")

    parser.set_defaults(per_line=False)

    (options, args) = E.start(parser, argv=argv)

    counter = E.Counter()
    if not args:
        counter.output += revert_stream(options.stdin, options.stdout,
                                        per_line=options.per_line)
        counter.input += 1
    for filename in args:
        E.debug("reversing {}".format(filename))
        with IOTools.open_file(filename) as inf:
            counter.output += revert_stream(inf, options.stdout,
                                            per_line=options.per_line)
        counter.input += 1

    E.info("reversed: {}".format(counter))
    E.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))

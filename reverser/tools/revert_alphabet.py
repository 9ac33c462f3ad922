"""revert-alphabet
==================

Interactively ask for an alphabet and a palindrome length limit and
print the alphabet reversed::

   $ reverser revert-alphabet
   Ingresa un alfabeto: abc
   Ingresa el límite de longitud de los palíndromos: 3
   Alfabeto invertido: cba

Input is read as whitespace-delimited tokens from the standard input
(or the file given with ``--stdin``). A missing token is taken to be
the empty string.

The length limit is read but not used. Log messages go to the
standard error unless ``--log`` is given.

"""

import sys
import cgatcore.experiment as E

from reverser.sequence import reverse
from reverser.toolkit import iterate_tokens, read_token

PROMPT_ALPHABET = "Ingresa un alfabeto: "
PROMPT_LENGTH = "Ingresa el límite de longitud de los palíndromos: "
RESULT_PREFIX = "Alfabeto invertido: "


def prompt(outfile, tokens, message, label):
    """write `message` to `outfile` and return the next token."""
    outfile.write(message)
    outfile.flush()
    value = read_token(tokens)
    if not value:
        E.warn("no input for {}, using empty string".format(label))
    return value


def main(argv=None):

    parser = E.OptionParser(version="%prog version: $Id$",
                            usage=globals()["__doc__"])

    if argv is None:
        argv = sys.argv

    # stdout carries the transcript, log to stderr unless --log is given
    argv = [argv[0], "--log2stderr"] + list(argv[1:])

    (options, args) = E.start(parser, argv=argv)

    tokens = iterate_tokens(options.stdin)

    alphabet = prompt(options.stdout, tokens, PROMPT_ALPHABET, "alphabet")
    length_limit = prompt(options.stdout, tokens, PROMPT_LENGTH, "length limit")
    E.debug("alphabet={!r}, length limit={!r}".format(alphabet, length_limit))

    options.stdout.write("{}{}\n".format(RESULT_PREFIX, reverse(alphabet)))

    E.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))

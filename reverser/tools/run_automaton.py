"""run-automaton
================

Run words through a deterministic finite automaton::

   reverser run-automaton --automaton=dfa.json 0011 101

Words are given as arguments. Without arguments, words are read from
the standard input, one per line. The output is a tab-separated table
with the columns ``word`` and ``accepted`` (``yes`` or ``no``).

A word containing a symbol without a transition is rejected.

"""

import sys
import cgatcore.experiment as E
import cgatcore.iotools as IOTools

from reverser.automata import load_automaton, run_automaton


def main(argv=None):

    parser = E.OptionParser(version="%prog version: $Id$",
                            usage=globals()["__doc__"])

    parser.add_option(
        "--automaton", dest="automaton", type="string",
        help="JSON file with the automaton [%default]")

    parser.set_defaults(automaton=None)

    (options, args) = E.start(parser, argv=argv)

    if options.automaton is None:
        raise ValueError("please specify an automaton with --automaton")

    with IOTools.open_file(options.automaton) as inf:
        automaton = load_automaton(inf)

    if args:
        words = args
    else:
        words = [line.rstrip("\r\n") for line in options.stdin]

    counter = E.Counter()
    options.stdout.write("word\taccepted\n")
    for word in words:
        if run_automaton(automaton, word):
            counter.accepted += 1
            accepted = "yes"
        else:
            counter.rejected += 1
            accepted = "no"
        options.stdout.write("{}\t{}\n".format(word, accepted))

    E.info("words: {}".format(counter))
    E.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))

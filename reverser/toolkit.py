"""toolkit of a few convenience functions for reading tool input.
"""

import logging as L


def iterate_tokens(infile):
    """iterate over whitespace-delimited tokens in `infile`.

    Lines are read one at a time so that prompts written between
    reads appear before the input they ask for.
    """
    for line in iter(infile.readline, ""):
        for token in line.split():
            yield token


def read_token(tokens, default=""):
    """return next token from iterator `tokens`.

    Returns `default` if there are no tokens left.
    """
    try:
        return next(tokens)
    except StopIteration:
        L.debug("read_token: input exhausted, using {!r}".format(default))
        return default


def read_stripped(infile):
    """return contents of `infile` without surrounding whitespace."""
    return "".join(infile.readlines()).strip()

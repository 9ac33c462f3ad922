"""sequence.py - reversal of character sequences
================================================

A character sequence is a plain python string. Reversal maps position
``i`` of the input to position ``len(s) - 1 - i`` of the output and
returns a new string; the input is never modified.

"""


def reverse(sequence):
    """return the characters of `sequence` in reverse order.

    The characters are copied into a list and symmetric positions are
    swapped until the two indices meet or cross.

    >>> reverse("hello")
    'olleh'
    >>> reverse("")
    ''
    """
    chars = list(sequence)
    left, right = 0, len(chars) - 1
    while left < right:
        chars[left], chars[right] = chars[right], chars[left]
        left += 1
        right -= 1
    return "".join(chars)

"""Small helpers shared by the renderers and the models."""


def cycle_slice(l, start_index, end_index):
    """Allows to do a cyclical slicing on any iterable.
    It's like a regular slicing, but it allows the start index
    to be greater than the end index.

    Parameters
    ----------
    iterable
        The object on which to iterate.
    int
        The start index.
    int
        The end index (can be lower than the start index).

    Returns
    -------
    list
        The objects between the start and the end index (inclusive).
    """
    if start_index <= end_index:
        return l[start_index:end_index+1]
    return l[start_index:] + l[:end_index+1]


def print_offset(offset: int, space: bool) -> str:
    """Returns a day offset like " +2 days" or "-1 day".

    Returns an empty string for a null offset. The leading space
    is added only if *space* is True.
    """
    if offset == 0:
        return ''
    output = ' ' if space else ''
    if offset > 0:
        output += '+'
    output += str(offset) + " day"
    if abs(offset) > 1:
        output += 's'
    return output


def print_padded_number(number: int, padding: int = 1) -> str:
    """Returns the number zero-padded to *padding* columns."""
    # Format specs are scoped to this call, nothing leaks to the next write.
    return "{:0{}d}".format(number, padding)


def print_vector(items, separator=", ", render=str) -> str:
    """Joins the rendered items.

    *separator* is either a string or a function taking an item and
    returning the string which joins it to the next one. The separator
    of the last item is never asked for.
    """
    if not callable(separator):
        return separator.join(render(item) for item in items)
    output = []
    sep = None
    for item in items:
        if sep is not None:
            output.append(sep)
        output.append(render(item))
        sep = separator(item)
    return ''.join(output)


class SpaceLatch:
    """Gives a space before every fragment but the first one.

    >>> put_space = SpaceLatch()
    >>> put_space() + "Mo" + put_space() + "10:00-12:00"
    'Mo 10:00-12:00'
    """
    def __init__(self):
        self.space = False

    def __call__(self):
        if self.space:
            return ' '
        self.space = True
        return ''

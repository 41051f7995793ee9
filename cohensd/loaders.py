import csv

import numpy

from cohensd import errors


class Matrix(object):
    """Row-labelled numeric matrix read from a delimited text file.

    Attributes
    ----------
    path : str
        Path of the file the matrix was read from.
    header : list of str
        Column names from the first line of the file.
    row_names : list of str
        Row labels in file order.
    values : numpy.ndarray
        A (rows, samples) array of float64 values.
    """
    def __init__(self, path, header, row_names, values):
        self.path = path
        self.header = header
        self.row_names = row_names
        self.values = values

    def __len__(self):
        return len(self.row_names)

    def __repr__(self):
        return 'Matrix({0!r}, rows={1}, samples={2})'.format(
            self.path, len(self), self.num_samples
        )

    @property
    def num_samples(self):
        return self.values.shape[1]


def load(path, delimiter='\t'):
    with open(path, 'r', newline='', encoding='utf-8') as file_:
        reader = csv.reader(file_, delimiter=delimiter)
        try:
            (header, row_names, rows) = _read(reader, path)
        except (UnicodeDecodeError, csv.Error) as e:
            raise errors.ParseError(
                '{0}:{1} {2}'.format(path, reader.line_num + 1, e)
            )

    if rows:
        values = numpy.array(rows, dtype=numpy.float64)
    else:
        values = numpy.empty((0, max(len(header) - 1, 0)))

    return Matrix(path, header, row_names, values)


def _read(reader, path):
    header = next(reader, None)
    if header is None:
        raise errors.ParseError('{0} is empty'.format(path))

    # The header may omit the name of the label column
    widths = (len(header), len(header) + 1)

    row_names = list()
    rows = list()
    seen = set()
    width = None
    for row in reader:
        if not row:
            continue

        lineno = reader.line_num
        if len(row) not in widths or (width and len(row) != width):
            raise errors.ParseError(
                '{0}:{1} has {2} fields, header has {3}'.format(
                    path, lineno, len(row), len(header)
                )
            )
        width = len(row)

        (name, cells) = (row[0], row[1:])
        if not cells:
            raise errors.ParseError(
                '{0}:{1} row {2} has no values'.format(path, lineno, name)
            )
        if name in seen:
            raise errors.ParseError(
                '{0}:{1} duplicate row name {2}'.format(path, lineno, name)
            )
        seen.add(name)

        row_names.append(name)
        rows.append(_parse(cells, path, lineno))

    return (header, row_names, rows)


def _parse(cells, path, lineno):
    values = list()
    for cell in cells:
        try:
            values.append(float(cell))
        except ValueError:
            raise errors.ParseError(
                '{0}:{1} non-float value {2!r}'.format(path, lineno, cell)
            )
    return values

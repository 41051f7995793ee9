import csv

from cohensd import constants


def write(path, row_names, values, delimiter=','):
    if len(row_names) != len(values):
        raise ValueError(
            '{0} row names but {1} values'.format(len(row_names), len(values))
        )

    with open(path, 'w', newline='') as file_:
        writer = csv.writer(file_, delimiter=delimiter, lineterminator='\n')
        writer.writerow(constants.OUTPUT_HEADER)
        writer.writerows(
            (name, repr(float(value)))
            for (name, value) in zip(row_names, values)
        )

import datetime

import numpy

from cohensd import errors, loaders, stats, writers
from cohensd.helpers import debug


def run(case_path, control_path, output_path, delimiter='\t',
        output_delimiter=',', pooled=True, undefined=0.0):
    begin = datetime.datetime.now()

    debug('Loading case matrix {0}'.format(case_path))
    case = loaders.load(case_path, delimiter)
    debug('Loading control matrix {0}'.format(control_path))
    control = loaders.load(control_path, delimiter)

    check(case, control)

    debug('Computing Cohen\'s d for {0} rows ({1} case, {2} control)'.format(
        len(case), case.num_samples, control.num_samples
    ))
    if len(case):
        d = stats.cohensd_rows(
            case.values, control.values, pooled=pooled, undefined=undefined
        )
    else:
        d = numpy.empty(0)

    writers.write(output_path, case.row_names, d, output_delimiter)

    end = datetime.datetime.now()
    debug('Writing {0} completed in {1:.2f} seconds'.format(
        output_path, (end - begin).total_seconds()
    ))

    return d


def check(case, control):
    if len(case) != len(control):
        raise errors.RowCountMismatchError(
            '{0} has {1} rows but {2} has {3}'.format(
                case.path, len(case), control.path, len(control)
            )
        )

    for (index, (a, b)) in enumerate(zip(case.row_names, control.row_names)):
        if a != b:
            raise errors.RowNamesMismatchError(
                'Row {0} is {1} in {2} but {3} in {4}'.format(
                    index + 1, a, case.path, b, control.path
                )
            )

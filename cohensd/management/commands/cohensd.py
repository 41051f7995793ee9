from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from cohensd import errors, helpers, utilities


class Command(BaseCommand):
    help = (
        'Computes Cohen\'s d between the rows of a case and a control '
        'expression matrix and writes a row_names,cohen_d file.'
    )

    def add_arguments(self, parser):
        parser.add_argument(
            'case_expression_matrix',
            help='Path to the \'case\' expression matrix.'
        )
        parser.add_argument(
            'control_expression_matrix',
            help='Path to the \'control\' expression matrix.'
        )
        parser.add_argument(
            'output_path', help='Path and filename of the output file.'
        )
        parser.add_argument(
            '-d', '--delimiter', type=helpers.check_delimiter,
            default=settings.INPUT_DELIMITER,
            help='Delimiter of the input files. Default is a tab.'
        )
        parser.add_argument(
            '--unpooled', action='store_false', dest='pooled',
            help=(
                'Use the standard deviation of the concatenated samples '
                'instead of the pooled standard deviation.'
            )
        )
        parser.add_argument(
            '--undefined', type=helpers.check_undefined,
            default=settings.UNDEFINED_EFFECT_SIZE,
            help=(
                'Value written for rows whose standard deviation is zero. '
                'Default is {0}.'.format(settings.UNDEFINED_EFFECT_SIZE)
            )
        )

    def handle(self, *args, **options):
        output_path = options['output_path']

        try:
            d = utilities.run(
                options['case_expression_matrix'],
                options['control_expression_matrix'],
                output_path,
                delimiter=options['delimiter'],
                output_delimiter=settings.OUTPUT_DELIMITER,
                pooled=options['pooled'],
                undefined=options['undefined'],
            )
        except (
                errors.ParseError, errors.RowCountMismatchError,
                errors.RowNamesMismatchError
               ) as e:
            raise CommandError(e.value)
        except OSError as e:
            raise CommandError(str(e))

        self.stdout.write('Wrote Cohen\'s d of {0} rows to {1}'.format(
            len(d), output_path
        ))

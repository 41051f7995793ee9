import os
import sys


def main():
    os.environ.setdefault(
        'DJANGO_SETTINGS_MODULE', 'ExpressionEffectSize.settings'
    )

    from django.core.management import execute_from_command_line

    execute_from_command_line(['cohensd', 'cohensd'] + sys.argv[1:])

import os

import cohensd


def get_absolute_path(dir_name):
    return os.path.join(cohensd.__path__[0], dir_name)

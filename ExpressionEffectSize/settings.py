import os

BASE_DIR = os.path.dirname(os.path.dirname(__file__))
SECRET_KEY = 'x3!k0v#p7dq2_u@f$8w^hz+9r&e1m*cj4y-lt6n(s=ga5b)oi'
DEBUG = True
ALLOWED_HOSTS = []
INSTALLED_APPS = (
    'cohensd',
)
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.path.join(BASE_DIR, 'db.sqlite3'),
    }
}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'America/New_York'
USE_I18N = True
USE_TZ = True

# Delimiter of the case and control expression matrices
INPUT_DELIMITER = '\t'

# Delimiter of the output file
OUTPUT_DELIMITER = ','

# Value written for a row whose pooled standard deviation is zero
UNDEFINED_EFFECT_SIZE = 0.0

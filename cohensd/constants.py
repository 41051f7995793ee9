OUTPUT_HEADER = ('row_names', 'cohen_d')

# Spellings accepted on the command line for a tab delimiter
TAB_ALIASES = ('\\t', 'tab', 'TAB')

UNDEFINED_ALIASES = ('nan', 'NaN', 'NA')

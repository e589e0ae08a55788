from .terminology import LookupTables, load_terminology_dictionary, get_lookup_tables

__all__ = [
    'LookupTables',
    'load_terminology_dictionary',
    'get_lookup_tables',
]

"""
summary statistics for BEDPE files of paired genomic intervals
"""
__version__ = '1.0.0'

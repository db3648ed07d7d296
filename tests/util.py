import os

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


def get_data(*paths):
    return os.path.join(DATA_DIR, *paths)


def bedpe_line(chrom1, start1, chrom2, start2, strand1='.', strand2='.', name='.', score='0'):
    return '\t'.join(
        [
            chrom1,
            str(start1),
            str(start1 + 1),
            chrom2,
            str(start2),
            str(start2 + 1),
            name,
            score,
            strand1,
            strand2,
        ]
    )

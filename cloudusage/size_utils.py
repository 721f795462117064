'''Convert byte counts to human-readable sizes and back.

Available functions:
approximate_size(size, a_kilobyte_is_1024_bytes)
    takes a size in bytes and returns a human-readable string
convert_size(dsize, newsuffix)
    takes a human-readable string and converts it to another suffix

Examples:
>>> approximate_size(1024)
'1.00 KiB'
>>> approximate_size(1000, False)
'1.00 KB'
>>> convert_size('1.00 GiB', 'MiB')
'1024.00 MiB'

'''

SUFFIXES = {1000: ['KB', 'MB', 'GB', 'TB', 'PB', 'EB', 'ZB', 'YB'],
            1024: ['KiB', 'MiB', 'GiB', 'TiB', 'PiB', 'EiB', 'ZiB', 'YiB']}


def approximate_size(size, a_kilobyte_is_1024_bytes=True, newsuffix=None, withsuffix=True):
    '''Convert a size in bytes to human-readable form.

    Keyword arguments:
    size -- size in bytes
    a_kilobyte_is_1024_bytes -- if True (default), use multiples of 1024
                                if False, use multiples of 1000

    Returns: string

    '''
    if size < 0:
        raise ValueError('number must be non-negative')

    if newsuffix:
        return approximate_size_specific(size, newsuffix, withsuffix)

    multiple = 1024 if a_kilobyte_is_1024_bytes else 1000
    for suffix in SUFFIXES[multiple]:
        size /= multiple
        if size < multiple:
            if withsuffix:
                return '{0:.2f} {1}'.format(size, suffix)
            return size

    raise ValueError('number too large')


def approximate_size_specific(size, newsuffix, withsuffix=True):
    """
    converts a size in bytes to a specific suffix (like GB, TB, TiB)
    """
    for multiple in SUFFIXES:
        for suffix in SUFFIXES[multiple]:
            if suffix.lower() == newsuffix.lower():
                power = SUFFIXES[multiple].index(suffix)
                newsizeint = float(size) / (multiple ** float(power + 1))
                if withsuffix:
                    return '{0:.2f} {1}'.format(newsizeint, suffix)
                return newsizeint

    raise ValueError(f'unknown suffix {newsuffix}')


def size_in_bytes(dsize):
    '''Convert a human-readable size like "1.50 GiB" back to bytes.'''
    dsize = dsize.strip()
    for multiple in SUFFIXES:
        for power, suffix in enumerate(SUFFIXES[multiple], start=1):
            if dsize.endswith(suffix):
                size = float(dsize[:-len(suffix)].strip())
                return size * (multiple ** power)

    raise ValueError(f'no known suffix in {dsize!r}')


def convert_size(dsize, newsuffix, withsuffix=True):
    '''Convert a size like 8 TB to another suffix

    Keyword arguments:
    dsize -- human-readable size
    newsuffix -- the suffix to change it to
    withsuffix -- return size with new suffix, otherwise returns just
            the number

    Returns: a new size

    '''
    return approximate_size(size_in_bytes(dsize), newsuffix=newsuffix, withsuffix=withsuffix)

class InvalidRecordError(ValueError):
    """
    raised when a line of a BEDPE file cannot be parsed into a paired record
    """

    def __init__(self, message, line_no=None):
        ValueError.__init__(self, message)
        self.line_no = line_no

    def __str__(self):
        if self.line_no is None:
            return self.args[0]
        return f'line {self.line_no}: {self.args[0]}'

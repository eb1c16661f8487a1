class CBRemapError(Exception):
    def __init__(self, msg=None):
        self.msg = msg

    def __str__(self):
        msg = 'ERROR: ' + str(self.__class__.__name__) + '\n'

        if hasattr(self, 'msg') and self.msg is not None:
            msg += self.msg

        return msg

class ConfigVariableError(CBRemapError):
    def __init__(self, variable_name, variable_value, expected=None):
        self.variable_name = variable_name
        self.variable_value = variable_value
        self.expected = expected

    def __str__(self):
        msg = super().__str__()
        msg += f'invalid value for {self.variable_name}: {self.variable_value!r}\n'
        if self.expected is not None:
            msg += f'it has to be {self.expected}.\n'

        return msg

class InputFileError(CBRemapError):
    def __init__(self, filename, reason):
        self.filename = filename
        self.reason = reason

    def __str__(self):
        msg = super().__str__()
        msg += f'cannot read {self.filename}: {self.reason}\n'

        return msg

class BarcodeLengthError(CBRemapError):
    def __init__(self, barcode, expected_length, source=None, line=None):
        self.barcode = barcode
        self.expected_length = expected_length
        self.source = source
        self.line = line

    def __str__(self):
        msg = super().__str__()
        msg += f'wrong barcode length: {self.barcode!r} has {len(self.barcode)} nt, '
        msg += f'expected {self.expected_length} nt.\n'
        if self.source is not None:
            msg += f'found in {self.source}'
            if self.line is not None:
                msg += f', line {self.line}'
            msg += '.\n'

        return msg

class BarcodeCountError(CBRemapError):
    def __init__(self, n_found, n_expected, source=None):
        self.n_found = n_found
        self.n_expected = n_expected
        self.source = source

    def __str__(self):
        msg = super().__str__()
        if self.n_found > self.n_expected:
            msg += 'too many barcodes to use in input list: '
            msg += f'more than {self.n_expected} found'
        else:
            msg += 'too little barcodes to use in input list: '
            msg += f'{self.n_found} found, {self.n_expected} expected'

        if self.source is not None:
            msg += f' in {self.source}'

        msg += '.\n'
        msg += 'the number of barcodes to use can be set as the optional 3rd argument.\n'

        return msg

class DuplicateBarcodeError(CBRemapError):
    def __init__(self, barcode, first_id, second_id):
        self.barcode = barcode
        self.first_id = first_id
        self.second_id = second_id

    def __str__(self):
        msg = super().__str__()
        msg += f'barcode to use {self.barcode} is listed twice '
        msg += f'(#{self.first_id} and #{self.second_id}).\n'

        return msg


class OBTreeError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class EmptyInputError(OBTreeError):
    def __str__(self):
        if not self.args:
            return "cannot build a tree from an empty sequence"
        return ''.join(map(str, self.args))

class ParseError(OBTreeError):
    pass

class FileParseError(OBTreeError):
    def __init__(self, filename, line, msg):
        super(FileParseError, self).__init__(filename, line, msg)
        self.filename = filename
        self.line = line
        self.msg = msg
    def __str__(self):
        return self.filename + ':' + str(self.line) + ": " + str(self.msg)

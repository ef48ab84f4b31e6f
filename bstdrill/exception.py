class BSTDrillError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class KeyNotFoundError(BSTDrillError, KeyError):
    def __init__(self, key):
        super(KeyNotFoundError, self).__init__(key)
        self.key = key

    def __str__(self):
        return "key not found: " + str(self.key)

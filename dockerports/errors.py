class DockerException(Exception):
    pass


class InvalidHost(DockerException, ValueError):
    pass


class InvalidVersion(DockerException):
    pass


class TrustKeyError(DockerException):
    def __init__(self, msg, path=None):
        super(TrustKeyError, self).__init__(msg)
        self.msg = msg
        self.path = path

    def __str__(self):
        if self.path:
            return '{0} ({1})'.format(self.msg, self.path)
        return self.msg

# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.


class FailedError(Exception):
    "Raised by WriterTB.fail_now to abort the current check sequence."
    pass


class SkippedError(Exception):
    "Raised by WriterTB.skip_now."
    pass


class WriterTB(object):
    """A test sink writing its log to a file-like object.

    Failed and skipped status are recorded. fail_now raises FailedError
    and skip_now raises SkippedError, so a check sequence can be aborted.

    This is especially useful for writing test cases of tools for testing.
    """

    def __init__(self, out, suffix=""):
        self.out = out
        self.suffix = suffix
        self._failed = False
        self._skipped = False

    def _write_line(self, text):
        if self.suffix:
            self.out.write(self.suffix)
            self.out.write(": ")
        self.out.write(text)
        self.out.write("\n")

    def log(self, *args):
        self._write_line(" ".join(str(a) for a in args))

    def logf(self, format, *args):
        self._write_line(format % args if args else format)

    def error(self, *args):
        self.log(*args)
        self.fail()

    def errorf(self, format, *args):
        self.logf(format, *args)
        self.fail()

    def fail(self):
        self._failed = True

    def fail_now(self):
        self.fail()
        raise FailedError()

    @property
    def failed(self):
        return self._failed

    def fatal(self, *args):
        self.log(*args)
        self.fail_now()

    def fatalf(self, format, *args):
        self.logf(format, *args)
        self.fail_now()

    def skip(self, *args):
        self.log(*args)
        self.skip_now()

    def skipf(self, format, *args):
        self.logf(format, *args)
        self.skip_now()

    def skip_now(self):
        self._skipped = True
        raise SkippedError()

    @property
    def skipped(self):
        return self._skipped

import contextlib
import io
import pathlib
import shutil
import sys
import tempfile
import time

import dill.source

import genprompt.exception
import genprompt.locations

TEST_TIMING = False


def timeit(f):
    def timetest():
        start = time.time()
        f()
        stop = time.time()
        usec = (stop - start) * 1000000
        print(f'TEST TIMING -- {f.__name__}: {usec}')
    # Keep the name, so that pytest still collects the wrapped test.
    timetest.__name__ = f.__name__
    return timetest if TEST_TIMING else f


class TestBase:
    __test__ = False

    # All harness failures, across instances. conftest.py checks this after each pytest test.
    total_failures = 0

    def __init__(self):
        self.failures = 0

    def description(self, x):
        if isinstance(x, str):
            return x
        try:
            return dill.source.getsource(x).split('\n')[0].strip()
        except Exception:
            return repr(x)

    def fail(self, test, message):
        print(f'{self.description(test)} failed: {message}', file=sys.__stdout__)
        self.record_failure()

    def record_failure(self):
        self.failures += 1
        TestBase.total_failures += 1

    def check_eq(self, test, expected, actual):
        if expected != actual:
            print(f'{self.description(test)} failed, expected != actual:', file=sys.__stdout__)
            print(f'    expected:\n<<<{expected!r}>>>', file=sys.__stdout__)
            print(f'    actual:\n<<<{actual!r}>>>', file=sys.__stdout__)
            self.record_failure()

    def check_substring(self, test, expected, actual):
        if expected not in actual:
            print(f'{self.description(test)} failed. Expected substring not found in actual:', file=sys.__stdout__)
            print(f'    expected:\n<<<{expected!r}>>>', file=sys.__stdout__)
            print(f'    actual:\n<<<{actual!r}>>>', file=sys.__stdout__)
            self.record_failure()

    def report_failures(self, label):
        print(f'{self.failures} failures: {label}')


class TestGenprompt(TestBase):
    __test__ = False


    def run(self,
            test,
            expected_out=None,
            expected_err=None,
            expected_return=None,
            expected_exception=None):
        # test is a function of no arguments. Its stdout, stderr, return value, and any exception
        # are compared to what's expected.
        print(f'TESTING: {self.description(test)}')
        actual_out, actual_err, actual_return, actual_exception = self.run_and_capture_output(test)
        if actual_exception is not None:
            if expected_exception is None:
                self.fail(test, f'Terminated by uncaught exception: ({type(actual_exception)}) {actual_exception}')
                return
            if not isinstance(actual_exception, expected_exception):
                self.fail(test, f'Expected {expected_exception}, but got ({type(actual_exception)}) {actual_exception}')
                return
        elif expected_exception is not None:
            self.fail(test, f'Expected {expected_exception}, but nothing was raised')
            return
        if expected_out is not None:
            self.check_eq(test, expected_out, actual_out)
        if expected_err is not None:
            self.check_substring(test, expected_err, actual_err)
        elif len(actual_err) > 0 and expected_exception is None:
            self.fail(test, f'Unexpected error output: {actual_err}')
        if expected_return is not None:
            self.check_eq(test, expected_return, actual_return)

    def run_and_capture_output(self, test):
        test_stdout = io.StringIO()
        test_stderr = io.StringIO()
        actual_return = None
        actual_exception = None
        with contextlib.redirect_stdout(test_stdout), contextlib.redirect_stderr(test_stderr):
            try:
                actual_return = test()
            except (Exception, genprompt.exception.KillShellException, genprompt.exception.HelpRequested) as e:
                actual_exception = e
        return test_stdout.getvalue(), test_stderr.getvalue(), actual_return, actual_exception


class TestDir(object):
    __test__ = False


    def __init__(self):
        self.test_dir = pathlib.Path(tempfile.mkdtemp())

    def __enter__(self):
        return self.test_dir

    def __exit__(self, *_):
        shutil.rmtree(self.test_dir, ignore_errors=True)


def locations(home, hostname='testhost', cwd=None):
    return genprompt.locations.Locations(home=home, hostname=hostname, cwd=cwd if cwd else home)


# Stands in for the filesystem: only the given paths exist. Probed paths are recorded, in order.
class FakeFilesystem(object):

    def __init__(self, *paths):
        self.paths = set(paths)
        self.probed = []

    def exists(self, path):
        self.probed.append(path)
        return path in self.paths

# @mindmaze_header@
import io
import logging
import os
import unittest
from contextlib import redirect_stderr
from tempfile import TemporaryDirectory

from xdg_basedir import common
from xdg_basedir.xdg import BaseDirectoryResolver


class TestLogging(unittest.TestCase):

    def setUp(self):
        self._tmpdir = TemporaryDirectory()
        self.logfile = os.path.join(self._tmpdir.name, 'xdg.log')
        self.handler = common.set_log_file(self.logfile)
        self.saved_config = dict(common.CONFIG)

    def tearDown(self):
        common.LOGGER.removeHandler(self.handler)
        self.handler.close()
        common.LOGGER.setLevel(logging.NOTSET)
        common.CONFIG.update(self.saved_config)
        self._tmpdir.cleanup()

    def _log_content(self):
        self.handler.flush()
        with open(self.logfile) as stream:
            return stream.read()

    def test_default_logged(self):
        """
        test that falling back to a default value is logged as debug
        """
        BaseDirectoryResolver({'HOME': '/home/manfred'}).cache_home()
        content = self._log_content()
        self.assertIn('DEBUG', content)
        self.assertIn('XDG_CACHE_HOME not set, using /home/manfred/.cache',
                      content)

    def test_wprint(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            common.wprint('something', 'odd')
        self.assertEqual(stderr.getvalue(), 'something odd\n')
        self.assertIn('WARNING: something odd', self._log_content())

    def test_dprint_quiet(self):
        common.CONFIG['debug'] = False
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            common.dprint('hidden')
        self.assertEqual(stderr.getvalue(), '')
        self.assertIn('DEBUG: hidden', self._log_content())

    def test_iprint_verbose(self):
        common.CONFIG['verbose'] = True
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            common.iprint('shown')
        self.assertEqual(stderr.getvalue(), 'shown\n')
        self.assertIn('INFO: shown', self._log_content())

#!/usr/bin/env python3
"""
Tests for package logging setup.
"""

import sys
import os
import logging
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from timetabler.log import init_logger


def test_console_level_follows_debug_flag():
    logger = init_logger(debug=False)
    assert logger.name == 'timetabler'
    assert [h.level for h in logger.handlers] == [logging.INFO]
    logger = init_logger(debug=True)
    assert [h.level for h in logger.handlers] == [logging.DEBUG], 'Handlers are replaced, not stacked'


def test_log_file_receives_module_debug_output(tmp_path):
    """Module loggers propagate to the package logger; the file gets DEBUG even when the console does not."""
    path = tmp_path / 'run.log'
    logger = init_logger(debug=False, log_file=str(path))
    logging.getLogger('timetabler.greedy').debug('Scheduled Algebra on Monday at 09:00')
    logging.getLogger('timetabler.repair').warning('Synthesized session 1/1 for Algebra')
    for handler in logger.handlers:
        handler.flush()
    text = path.read_text()
    assert '[DEBUG]' in text and 'Scheduled Algebra' in text
    assert '[WARNING]' in text and 'Synthesized session' in text
    init_logger()

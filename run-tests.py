#!/usr/bin/env python3
"""Run the fundeps test suite with the package importable from 'src'."""
import os
import subprocess
import sys


args = [
    sys.executable or 'python',  # Interpreter to call for testing.
    '-B',                        # Don't write .pyc files on import.
    '-W', 'default',             # Enable default handling for all warnings.
    '-m', 'unittest',            # Run the unittest module as a script.
]

# Use arguments passed to script or configure test discovery.
args.extend(sys.argv[1:] or ['discover', '-s', 'tests', '-t', '.'])

cwd = os.path.dirname(__file__) or '.'

env = os.environ.copy()
env['PYTHONPATH'] = 'src'

sys.exit(subprocess.call(args=args, cwd=cwd, env=env))

#!/usr/bin/env python3
"""
Main test runner for the minilex scanner tests.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests():
    """Run a smoke scan, then the unit test suites."""

    print("🚀 minilex Scanner Test Suite")
    print("=" * 60)

    try:
        from minilex.lexer import Lexer, Tag
        print("✅ Scanner modules imported successfully")
        print()
    except ImportError as e:
        print(f"❌ Failed to import scanner modules: {e}")
        return False

    print("Scanning the sample program...")
    try:
        tokens = Lexer("if a >= 100.34").tokenize()
        print(f"     Generated {len(tokens)} tokens: {' '.join(str(t) for t in tokens)}")
        expected = [Tag.IF, Tag.ID, Tag.GE, Tag.REAL, Tag.EOF]
        if [t.tag for t in tokens] != expected:
            print("❌ Sample scan produced an unexpected tag sequence")
            return False
        print("✅ Sample scan PASSED")
        print()
    except Exception as e:
        print(f"❌ Sample scan FAILED: {e}")
        import traceback
        traceback.print_exc()
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print()
    if result.wasSuccessful():
        print("🎉 All tests PASSED!")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)

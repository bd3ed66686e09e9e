def load_tests(loader, tests, pattern):
    import os

    this_dir = os.path.dirname(__file__)
    tests.addTests(loader.discover(start_dir=this_dir, pattern=pattern or 'test*.py'))
    return tests

if __name__ == '__main__':
    import unittest
    unittest.main()

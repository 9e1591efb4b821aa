from tests.test_utils.paths import sentinel_path

__all__ = ["sentinel_path"]

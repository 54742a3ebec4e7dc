import unittest
import os
import yaml
from unittest.mock import patch, mock_open
from compatibility.config_loader import load_config, AppConfig, EngineConfig


class TestConfigLoader(unittest.TestCase):

    def setUp(self):
        self.sample_config = {
            "engine": {
                "weights": {
                    "jobs": {"skills": 0.5, "price": 0.2, "location": 0.1, "availability": 0.1, "quality": 0.1}
                },
                "scorer": {
                    "default_max_distance_km": 25.0,
                    "skill_synonyms": [["javascript", "js"]]
                },
                "aggregator": {"max_suggestions": 3}
            },
            "cache": {"enabled": True, "redis_url": "redis://cache:6379/1", "ttl_seconds": 600},
            "web": {"port": 9000}
        }
        self.config_yaml = yaml.dump(self.sample_config)

    def test_load_config_from_yaml(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                config = load_config("dummy_path.yaml")
                self.assertIsInstance(config, AppConfig)
                self.assertEqual(config.engine.weights["jobs"]["skills"], 0.5)
                self.assertEqual(config.engine.scorer.default_max_distance_km, 25.0)
                self.assertEqual(config.engine.scorer.skill_synonyms, [["javascript", "js"]])
                self.assertEqual(config.engine.aggregator.max_suggestions, 3)
                self.assertTrue(config.cache.enabled)
                self.assertEqual(config.cache.ttl_seconds, 600)
                self.assertEqual(config.web.port, 9000)

    def test_missing_file_uses_defaults(self):
        with patch("os.path.exists", return_value=False):
            with patch.dict(os.environ, {}, clear=True):
                config = load_config("missing.yaml")
                self.assertEqual(config.engine.weights, EngineConfig().weights)
                self.assertEqual(config.engine.scorer.neutral_score, 50.0)
                self.assertEqual(config.engine.aggregator.suggestion_threshold, 70.0)
                self.assertFalse(config.cache.enabled)
                self.assertEqual(config.cache.ttl_seconds, 3600)

    def test_empty_file_uses_defaults(self):
        with patch("builtins.open", mock_open(read_data="")):
            with patch("os.path.exists", return_value=True):
                config = load_config("empty.yaml")
                self.assertEqual(config.web.port, 8080)

    def test_env_var_override_redis(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"REDIS_URL": "redis://env:6379/0", "COMPAT_CACHE_ENABLED": "false"}):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.cache.redis_url, "redis://env:6379/0")
                    self.assertFalse(config.cache.enabled)

    def test_env_var_override_web(self):
        with patch("os.path.exists", return_value=False):
            with patch.dict(os.environ, {"WEB_HOST": "127.0.0.1", "WEB_PORT": "9100"}):
                config = load_config("missing.yaml")
                self.assertEqual(config.web.host, "127.0.0.1")
                self.assertEqual(config.web.port, 9100)

    def test_default_weights_per_category(self):
        weights = EngineConfig().weights
        self.assertEqual(set(weights), {"jobs", "services", "rentals"})
        for category, table in weights.items():
            with self.subTest(category=category):
                self.assertAlmostEqual(sum(table.values()), 1.0)

    def test_repo_config_matches_defaults(self):
        """The shipped config.yaml carries the same weight tables as the defaults."""
        repo_root = os.path.join(os.path.dirname(__file__), "..", "..", "..")
        with patch.dict(os.environ, {}, clear=True):
            config = load_config(os.path.join(repo_root, "config.yaml"))
        self.assertEqual(config.engine.weights, EngineConfig().weights)


if __name__ == '__main__':
    unittest.main()

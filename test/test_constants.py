#!/usr/bin/env python3
import os
import sys
import unittest
from unittest.mock import patch

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from release_notifier.constants import load_category_configs
from release_notifier.models import EventCategory


class TestCategoryConfigs(unittest.TestCase):
    def test_reads_environment(self):
        env = {
            'MOD_VERSION_WEBHOOK_URL': 'https://discord.com/api/webhooks/1/mods',
            'MOD_VERSION_ROLE_ID': '111',
            'LAUNCHER_VERSION_DOWNLOAD_URL': 'https://example.com/download',
            'LAUNCHER_VERSION_NAME': 'Meu Launcher',
            'LOADER_VERSION_ROLE_ID': '',
        }
        with patch.dict(os.environ, env, clear=True):
            configs = load_category_configs()

        mod = configs[EventCategory.MOD_VERSION]
        self.assertEqual(mod.webhook_url, 'https://discord.com/api/webhooks/1/mods')
        self.assertEqual(mod.role_id, '111')
        self.assertEqual(mod.name, 'Mods')
        self.assertIsNone(mod.download_url)

        launcher = configs[EventCategory.LAUNCHER_VERSION]
        self.assertEqual(launcher.name, 'Meu Launcher')
        self.assertEqual(launcher.download_url, 'https://example.com/download')
        self.assertIsNone(launcher.webhook_url)

        # String vazia conta como não configurada
        self.assertIsNone(configs[EventCategory.LOADER_VERSION].role_id)

    def test_download_url_is_launcher_only(self):
        with patch.dict(os.environ, {'MOD_VERSION_DOWNLOAD_URL': 'https://example.com/x'}, clear=True):
            configs = load_category_configs()
        self.assertIsNone(configs[EventCategory.MOD_VERSION].download_url)


if __name__ == '__main__':
    unittest.main()

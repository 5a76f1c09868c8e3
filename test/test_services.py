#!/usr/bin/env python3
import os
import sys
import unittest
from unittest.mock import Mock, patch

import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from release_notifier.models import ComposedNotification, EventCategory
from release_notifier.services import DiscordWebhookSender, SendError


def notification(channel='https://discord.com/api/webhooks/1/mods', mention=True):
    return ComposedNotification(
        category=EventCategory.MOD_VERSION,
        channel=channel,
        embeds=[{'title': 'Better Trees'}],
        content='<@&111>' if mention else None,
        includes_mention=mention,
        role_id='111' if mention else None,
    )


class TestDiscordWebhookSender(unittest.TestCase):
    @patch('release_notifier.services.requests.post')
    def test_posts_payload_to_channel(self, mock_post):
        mock_post.return_value = Mock(status_code=204, text='')

        DiscordWebhookSender(timeout=3).send(notification())

        mock_post.assert_called_once_with(
            'https://discord.com/api/webhooks/1/mods',
            json={
                'embeds': [{'title': 'Better Trees'}],
                'content': '<@&111>',
                'allowed_mentions': {'roles': ['111']},
            },
            timeout=3,
        )

    @patch('release_notifier.services.requests.post')
    def test_without_mention_blocks_all_pings(self, mock_post):
        mock_post.return_value = Mock(status_code=204, text='')
        DiscordWebhookSender().send(notification(mention=False))
        payload = mock_post.call_args.kwargs['json']
        self.assertNotIn('content', payload)
        self.assertEqual(payload['allowed_mentions'], {'parse': []})

    @patch('release_notifier.services.requests.post')
    def test_http_error_raises_send_error(self, mock_post):
        mock_post.return_value = Mock(status_code=429, text='rate limited')
        with self.assertRaises(SendError) as ctx:
            DiscordWebhookSender().send(notification())
        self.assertIn('429', str(ctx.exception))

    @patch('release_notifier.services.requests.post')
    def test_network_error_raises_send_error(self, mock_post):
        mock_post.side_effect = requests.ConnectionError('boom')
        with self.assertRaises(SendError):
            DiscordWebhookSender().send(notification())

    @patch('release_notifier.services.requests.post')
    def test_missing_webhook_raises_send_error(self, mock_post):
        with self.assertRaises(SendError):
            DiscordWebhookSender().send(notification(channel=None))
        mock_post.assert_not_called()

    @patch('release_notifier.services.requests.post')
    def test_sender_keeps_no_shared_session(self, mock_post):
        # Cada envio é uma chamada independente a requests.post
        mock_post.return_value = Mock(status_code=204, text='')
        sender = DiscordWebhookSender()
        sender.send(notification())
        sender.send(notification(mention=False))
        self.assertEqual(mock_post.call_count, 2)
        self.assertFalse(hasattr(sender, 'session'))


if __name__ == '__main__':
    unittest.main()

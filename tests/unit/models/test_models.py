# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for typed API records."""

import unittest

from threecommas.core.errors import ValidationError
from threecommas.models.account import Account
from threecommas.models.bot import Bot
from threecommas.models.deal import Deal
from threecommas.models.record import ApiRecord


class TestBot(unittest.TestCase):
    def setUp(self):
        self.payload = {
            "id": 42,
            "account_id": "7",
            "name": "BTC long",
            "is_enabled": True,
            "pairs": ["USDT_BTC", "USDT_ETH"],
            "base_order_volume": "10.0",
            "take_profit": "1.5",
            "max_active_deals": 3,
            "active_deals_count": 1,
            "created_at": "2021-03-01T10:00:00.000Z",
            "strategy_list": [{"strategy": "nonstop"}],
        }

    def test_from_api(self):
        bot = Bot.from_api(self.payload)
        self.assertEqual(bot.id, 42)
        self.assertEqual(bot.account_id, 7)
        self.assertEqual(bot.name, "BTC long")
        self.assertTrue(bot.is_enabled)
        self.assertEqual(bot.pairs, ["USDT_BTC", "USDT_ETH"])
        self.assertEqual(bot.base_order_volume, 10.0)
        self.assertEqual(bot.take_profit, 1.5)
        self.assertEqual(bot.max_active_deals, 3)
        self.assertIsNone(bot.updated_at)

    def test_untyped_fields_available(self):
        bot = Bot.from_api(self.payload)
        self.assertEqual(bot["strategy_list"], [{"strategy": "nonstop"}])
        self.assertIn("strategy_list", bot)
        self.assertIsNone(bot.get("missing"))
        self.assertEqual(bot.to_dict(), self.payload)

    def test_raw_is_a_copy(self):
        bot = Bot.from_api(self.payload)
        self.payload["name"] = "changed"
        self.assertEqual(bot["name"], "BTC long")


class TestDeal(unittest.TestCase):
    def test_from_api(self):
        deal = Deal.from_api(
            {
                "id": "1001",
                "bot_id": 42,
                "pair": "USDT_BTC",
                "status": "completed",
                "closed_at": "2021-03-02T10:00:00.000Z",
                "final_profit": "0.0012",
                "usd_final_profit": "1.23",
                "actual_profit_percentage": "",
            }
        )
        self.assertEqual(deal.id, 1001)
        self.assertEqual(deal.bot_id, 42)
        self.assertEqual(deal.usd_final_profit, 1.23)
        self.assertIsNone(deal.actual_profit_percentage)
        self.assertTrue(deal.is_finished)

    def test_active_deal(self):
        self.assertFalse(Deal.from_api({"id": 1, "closed_at": None}).is_finished)


class TestAccount(unittest.TestCase):
    def test_from_api(self):
        account = Account.from_api(
            {"id": 7, "name": "Binance", "exchange_name": "Binance", "market_code": "binance", "usd_amount": "150.5"}
        )
        self.assertEqual(account.name, "Binance")
        self.assertEqual(account.usd_amount, 150.5)
        self.assertIsNone(account.btc_amount)


class TestValidation(unittest.TestCase):
    def test_missing_id(self):
        with self.assertRaises(ValidationError):
            Bot.from_api({"name": "no id"})

    def test_non_numeric_id(self):
        with self.assertRaises(ValidationError):
            Deal.from_api({"id": "abc"})

    def test_non_object_payload(self):
        with self.assertRaises(ValidationError):
            Account.from_api(["not", "a", "dict"])

    def test_from_api_list(self):
        bots = Bot.from_api_list([{"id": 1}, {"id": 2}])
        self.assertEqual([b.id for b in bots], [1, 2])

    def test_from_api_list_requires_list(self):
        with self.assertRaises(ValidationError):
            Bot.from_api_list({"id": 1})

    def test_base_record(self):
        record = ApiRecord.from_api({"id": 5, "x": 1})
        self.assertEqual(record.id, 5)
        self.assertEqual(len(record), 2)
        self.assertEqual(list(record), ["id", "x"])


if __name__ == "__main__":
    unittest.main()

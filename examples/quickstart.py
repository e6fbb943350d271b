import logging
import os
import sys
from pathlib import Path

# Add src to PYTHONPATH for local runs
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from threecommas import Credentials, RateLimitExhaustedError, ThreeCommasClient

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))

api_key = os.environ.get("THREECOMMAS_API_KEY") or input("3Commas API key: ").strip()
api_secret = os.environ.get("THREECOMMAS_API_SECRET") or input("3Commas API secret: ").strip()
if not api_key or not api_secret:
	print("No credentials entered; exiting.")
	sys.exit(1)

credentials = Credentials(api_key=api_key, api_secret=api_secret)

with ThreeCommasClient() as client:
	accounts = client.get(credentials, "/ver1/accounts")
	print({"call": "GET /ver1/accounts", "status": accounts.status, "error": accounts.error})
	if not accounts.ok:
		sys.exit(2)
	for account in accounts.data:
		print(f"- {account.get('id')}: {account.get('name')} ({account.get('exchange_name')})")

	try:
		bots = client.bots.list(credentials, scope="enabled")
		print(f"Enabled bots: {len(bots)}")
		for bot in bots[:10]:
			print(f"- {bot.id}: {bot.name} pairs={','.join(bot.pairs)} active_deals={bot.active_deals_count}")

		df = client.dataframe.get(
			credentials,
			"/ver1/deals",
			{"scope": "finished"},
			limit=5000,
			columns=["id", "bot_id", "pair", "closed_at", "usd_final_profit"],
		)
	except RateLimitExhaustedError as ex:
		print(f"Still rate limited after {ex.attempts} attempts; try again later.")
		sys.exit(3)

	if df.empty:
		print("No finished deals.")
	else:
		df["usd_final_profit"] = df["usd_final_profit"].astype(float)
		print(df.groupby("bot_id")["usd_final_profit"].sum().sort_values(ascending=False).head(10))

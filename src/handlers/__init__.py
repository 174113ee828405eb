"""
Lambda Handlers for Reminders API

サーバレス構成のエントリポイント:
- Reminders (API Gateway → DynamoDB)
"""

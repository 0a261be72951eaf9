"""
Static placeholder page served for every non-API path.
"""

INDEX_HTML = """<!DOCTYPE html>
<html>
  <head>
    <title>Telegram Caption Bot</title>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <link rel="stylesheet" href="https://cdn.replit.com/agent/bootstrap-agent-dark-theme.min.css">
  </head>
  <body data-bs-theme="dark">
    <div class="container py-4">
      <div class="card">
        <div class="card-header">
          <h1>Telegram Caption Bot</h1>
        </div>
        <div class="card-body">
          <div class="alert alert-success">
            <h4>Bot is Running on AWS Lambda</h4>
            <p>The Telegram bot is active and running. Send it /help on Telegram to get started.</p>
          </div>
        </div>
      </div>
    </div>
  </body>
</html>
"""

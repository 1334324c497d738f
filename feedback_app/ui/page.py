"""Application page shell around the feedback form."""

PAGE_TITLE = "App Feedback"

_STYLES = """
    * { box-sizing: border-box; }
    body {
      margin: 0;
      padding: 1.5rem;
      background: #f5f7fb;
      color: #162334;
      font-family: "Segoe UI", Arial, sans-serif;
      line-height: 1.45;
    }
    .container { max-width: 640px; margin: 0 auto; }
    header { text-align: center; margin-bottom: 1.5rem; }
    .subtitle { color: #5d6f84; }
    .feedback-form, .success-message {
      background: #ffffff;
      border: 1px solid #d6dce5;
      border-radius: 12px;
      padding: 1.25rem;
    }
    .form-group { display: grid; gap: 0.35rem; margin-bottom: 1rem; }
    .form-group input, .form-group textarea {
      font: inherit;
      padding: 0.55rem 0.65rem;
      border: 1px solid #d6dce5;
      border-radius: 8px;
    }
    .required { color: #b82727; }
    .error-message {
      background: #fdecec;
      border: 1px solid #f3b9b9;
      border-radius: 8px;
      color: #b82727;
      padding: 0 0.8rem;
      margin-bottom: 1rem;
    }
    .submit-btn {
      width: 100%;
      padding: 0.7rem;
      border: 0;
      border-radius: 8px;
      background: #1653b5;
      color: #ffffff;
      font: inherit;
      cursor: pointer;
    }
    .submit-btn:disabled { opacity: 0.6; cursor: progress; }
    .success-message { text-align: center; }
    .success-icon { font-size: 2.5rem; color: #0f7a42; }
    footer { text-align: center; color: #5d6f84; margin-top: 1.5rem; }
"""


def render_page(body: str) -> str:
    """Wrap a rendered form view in the full HTML document."""
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{PAGE_TITLE}</title>
  <style>{_STYLES}</style>
</head>
<body>
  <div class="container">
    <header>
      <h1>&#128241; {PAGE_TITLE}</h1>
      <p class="subtitle">We'd love to hear from you! Your feedback helps us improve.</p>
    </header>
    <main>
{body}
    </main>
    <footer>
      <p>Your feedback is valuable to us. Thank you for helping us improve!</p>
    </footer>
  </div>
</body>
</html>
"""

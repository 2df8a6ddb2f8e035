"""HTML page shell for the main view.

The page script forwards user events to the server and applies the
returned labels and notifications without a reload.
"""

from html import escape
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modules.main_view.view import MainView


PAGE_HTML = """<!DOCTYPE html>
<html lang="PAGE_LANG">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Locale demo</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif;
            color: #1F2937;
            background: #F9FAFB;
            margin: 0;
        }

        main {
            display: flex;
            flex-direction: column;
            align-items: center;
            gap: 16px;
            padding: 40px 20px;
        }

        .field {
            display: flex;
            flex-direction: column;
            gap: 4px;
            min-width: 240px;
        }

        .field label {
            font-size: 14px;
            color: #6B7280;
        }

        .button {
            padding: 10px 20px;
            border-radius: 6px;
            border: 2px solid #0051BA;
            background: white;
            color: #0051BA;
            font-weight: 600;
            cursor: pointer;
        }

        .button-primary {
            background: #0051BA;
            color: white;
        }

        #notifications {
            position: fixed;
            bottom: 20px;
            left: 50%;
            transform: translateX(-50%);
        }

        .notification {
            background: #1F2937;
            color: white;
            padding: 12px 20px;
            border-radius: 6px;
            margin-top: 8px;
        }
    </style>
</head>
<body>
    <main id="main">
PAGE_CONTENT
    </main>
    <div id="notifications" role="status" aria-live="polite"></div>

    <script>
        function showNotification(text) {
            const el = document.createElement('div');
            el.className = 'notification';
            el.textContent = text;
            document.getElementById('notifications').appendChild(el);
            setTimeout(() => el.remove(), 5000);
        }

        async function post(path, body) {
            const response = await fetch(path, {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                credentials: 'same-origin',
                body: JSON.stringify(body || {}),
            });
            return response.json();
        }

        function apply(result) {
            if (result.reload) {
                window.location.reload();
                return;
            }
            if (result.locale) {
                document.documentElement.lang = result.locale;
            }
            Object.entries(result.labels || {}).forEach(([id, text]) => {
                const el = document.getElementById(id);
                if (el) {
                    el.textContent = text;
                }
            });
            (result.notifications || []).forEach(showNotification);
        }

        const languageSelect = document.getElementById('languageSelect');
        languageSelect.addEventListener('change', async () => {
            apply(await post('/locale', {locale: languageSelect.value}));
        });

        document.querySelectorAll('[data-action="clear-locale"]').forEach((button) => {
            button.addEventListener('click', async () => {
                apply(await post('/locale/clear'));
            });
        });

        const greetingButton = document.querySelector('[data-action="greet"]');
        async function greet() {
            const name = document.getElementById('nameField').value;
            apply(await post('/greet', {name: name}));
        }
        greetingButton.addEventListener('click', greet);
        document.addEventListener('keydown', (e) => {
            if (e.key === greetingButton.dataset.shortcut && e.target !== languageSelect) {
                e.preventDefault();
                greet();
            }
        });
    </script>
</body>
</html>
"""


def render_page(view: "MainView") -> str:
    content = "\n".join(f"        {child.render()}" for child in view.children)
    return PAGE_HTML.replace("PAGE_LANG", escape(view.locale.tag)).replace(
        "PAGE_CONTENT", content
    )

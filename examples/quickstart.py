"""Quickstart example for upgrader.

This example demonstrates resolving the upgrade prompt messages and
replacing a single message.

Note: Placeholder substitution is done here with str.replace for brevity.
The catalog itself always returns the raw templates.
"""

from upgrader import UpgraderMessage, UpgraderMessages, extract_placeholders

# Example 1: Explicit language
print("=" * 50)
print("Example 1: Explicit Language")
print("=" * 50)

messages = UpgraderMessages("fr")
print(messages.title)
# Output: Mettre à jour l'application?
print(messages.message(UpgraderMessage.BUTTON_TITLE_LATER))
# Output: PLUS TARD

# Example 2: Detected language with caller-side fallback
print("\n" + "=" * 50)
print("Example 2: Host Locale Detection")
print("=" * 50)

messages = UpgraderMessages()
fallback = UpgraderMessages("en")
title = messages.title or fallback.title
print(f"{messages.language_code}: {title}")

# Example 3: Override one message
print("\n" + "=" * 50)
print("Example 3: Override One Message")
print("=" * 50)

messages = UpgraderMessages(
    "en", overrides={UpgraderMessage.BUTTON_TITLE_IGNORE: "My Ignore"}
)
for message_id, template in messages.messages().items():
    print(f"{message_id}: {template}")

# Example 4: Filling in the body
print("\n" + "=" * 50)
print("Example 4: Body Placeholders")
print("=" * 50)

body = messages.body or ""
print(sorted(extract_placeholders(body)))
# Output: ['appName', 'currentAppStoreVersion', 'currentInstalledVersion']
values = {"appName": "Upgrader", "currentAppStoreVersion": "1.2", "currentInstalledVersion": "1.0"}
for name, value in values.items():
    body = body.replace("{{" + name + "}}", value)
print(body)
# Output: A new version of Upgrader is available! Version 1.2 is now available-you have 1.0.

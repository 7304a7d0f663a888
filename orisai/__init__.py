"""Lead outreach automation package.

Holds the automation-rule engine that decides whether a generated outreach
email is sent automatically or queued for manual review, together with the
storage and use cases that feed it.
"""

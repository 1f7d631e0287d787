"""
Driver integrations for kuromi-pageobjects.

Integrations are imported explicitly so their driver stays an optional
dependency:

    import kuromi_pageobjects.integrations.playwright  # registers Playwright types
"""

"""Run a page's embedded G_testRunner suite in headless Chromium."""

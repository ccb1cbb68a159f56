"""
HNT Swim Club E2E scenarios.

These tests drive a real browser against a running storefront and are
skipped when the configured application is not reachable.

Test Modules:
    - test_auth: login, registration and logout (steps 1-7)
    - test_admin: admin player management (steps 8-10)
    - test_shopping: product, cart, search and payment QR (steps 11-15)
    - test_orders: order history, recipient edits and cancellation (steps 16-18)

Running Tests:
    # Run all E2E scenarios
    pytest tests/e2e/ -m e2e

    # Run against another deployment with a visible browser
    E2E_BASE_URL=http://staging.local E2E_HEADLESS=false pytest tests/e2e/

    # Slow every action down by 500 ms
    E2E_SLOW_MO=500 pytest tests/e2e/

Environment Variables:
    E2E_BASE_URL: Storefront base URL (default: http://localhost:3000)
    E2E_BROWSER: chromium, firefox or webkit (default: chromium)
    E2E_HEADLESS: Run in headless mode (default: true)
    E2E_EXPLICIT_WAIT: Default wait bound in seconds (default: 10)
    E2E_USER_EMAIL / E2E_USER_PASSWORD: Regular user credentials
    E2E_ADMIN_EMAIL / E2E_ADMIN_PASSWORD: Admin credentials
    E2E_CONFIG_FILE: Optional TOML configuration file
"""

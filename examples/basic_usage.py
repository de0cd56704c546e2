#!/usr/bin/env python3
"""
Basic ghcollect usage example.

Queries a public repository and prints recent issue and pull request
activity. Set GITHUB_TOKEN for a higher API quota.
Run with: python examples/basic_usage.py [https://github.com/owner/name]
"""

import logging
import sys
from datetime import date, timedelta

from ghcollect import GitHubClient, GitHubError, InvalidArgumentError, configure_logging

REPOSITORY = sys.argv[1] if len(sys.argv) > 1 else "https://github.com/psf/requests"

configure_logging(level=logging.INFO)

print("=== ghcollect Basic Usage Example ===\n")

with GitHubClient.from_env() as client:
    # 1. Issues opened in the last 30 days
    since = date.today() - timedelta(days=30)
    try:
        issues = client.issues.list(REPOSITORY, state="all", created_on_or_after=since)
    except GitHubError as e:
        print(f"   Request failed: {e}")
        sys.exit(1)

    print(f"1. Issues created since {since}: {len(issues)} (first page only)")
    for issue in issues[:5]:
        print(f"   #{issue['number']} {issue['title']}")

    # 2. Weekly merged pull requests
    print("\n2. Merged pull requests per week:")
    for bucket in client.pulls.weekly(REPOSITORY, number_of_weeks=4, data_type="merged"):
        label = "total" if bucket.is_total else f"week of {bucket.week_start}"
        print(f"   {label}: {bucket.count}")

    # 3. The one deliberate argument guard
    print("\n3. Contradictory ranking arguments:")
    try:
        client.issues.top(REPOSITORY, state="open", closed_on_or_after=since)
    except InvalidArgumentError as e:
        print(f"   Caught InvalidArgumentError: {e.message}")

    # 4. Contributors
    contributors = client.repos.contributors(REPOSITORY)
    logins = client.repos.unique_contributors(contributors)
    print(f"\n4. Contributors: {len(logins)}")
    print(f"   {', '.join(logins[:10])}")

print("\n=== Done ===")

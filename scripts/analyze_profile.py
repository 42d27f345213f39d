#!/usr/bin/env python3
"""
Analyze a GitHub profile and print the dashboard.

Environment variables:
  GITHUB_USERNAME: GitHub handle to analyze (required)
  GITHUB_TOKEN: Personal access token for higher rate limits (optional)
  DASHBOARD_ROLE: visitor or recruiter (default: visitor)
  JOB_DESCRIPTION_PATH: Text or PDF job description, matched in the recruiter role
  REPORT_PATH: Write the printable markdown report to this path
"""

from profile_analyzer.controller import main

if __name__ == "__main__":
    main()

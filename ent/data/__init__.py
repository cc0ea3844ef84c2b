"""Data models for CVE feeds, dashboard build tasks and upstream version lookups."""
"""Mock ORCID API Tool: a stand-in for the ORCID v3.0 API."""

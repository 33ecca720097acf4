"""Scheduled sync of NGX equity prices and bands to an on-chain price oracle."""

"""LendShelf: peer-to-peer listings for items to sell or lend."""

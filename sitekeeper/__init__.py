"""SiteKeeper - a local directory of websites, their offers and article specs."""

"""Layout geometry, anchor-based widgets and the interface manager with its standard screen layout."""
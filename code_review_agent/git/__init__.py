"""Git bounded context: reading pending changes of a working tree."""

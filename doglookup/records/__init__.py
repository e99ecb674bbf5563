"""DNS resource record types and how each is read from the wire."""
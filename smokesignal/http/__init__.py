"""HTTP helpers: language negotiation, URLs, pagination, time zones, templates, tabs and OAuth metadata."""
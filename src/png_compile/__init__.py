"""PNG compile - synthetic fixture encoder."""

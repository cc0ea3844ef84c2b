"""Recipe model, monitoring data, and parsers for stone.yaml and package.yml recipes."""
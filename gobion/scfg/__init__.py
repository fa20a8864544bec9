"""Control-flow graphs and scoped control-flow graphs with DOT output."""
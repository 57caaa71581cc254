# Agents Module

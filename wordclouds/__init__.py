"""WordClouds admin backend for a Strapi-hosted word-cloud collection."""

"""File storage services, provider interfaces, and local-disk and URL-prefix providers."""
"""Document scanning, folder trees and search."""
